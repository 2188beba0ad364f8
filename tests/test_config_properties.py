"""
Property-based tests for FileFactoryConfig serialization and overrides.
"""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from filefactory.core.config import (
    FileFactoryConfig,
    LoggingConfig,
    MergeConfig,
    ShellConfig,
    load_config,
)
from filefactory.services import MergeEngine

safe_text = st.text(
    alphabet=st.characters(
        whitelist_categories=("L", "N", "P"),
        blacklist_characters="\x00\n\r\t",
    ),
    min_size=1,
    max_size=30,
).filter(lambda s: s.strip() == s and s != "")

log_level = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


@st.composite
def config_strategy(draw):
    """Generate valid FileFactoryConfig instances."""
    return FileFactoryConfig(
        merge=MergeConfig(
            chunk_size=draw(st.integers(min_value=1, max_value=1 << 20)),
            report_steps=draw(st.integers(min_value=1, max_value=100)),
            timestamp_format=draw(st.sampled_from(["%Y-%m-%d %H:%M:%S", "%H:%M", "%Y%m%d"])),
            header_newline=draw(st.sampled_from(["\n", "\r\n", "\r"])),
            follow_symlinks=draw(st.booleans()),
        ),
        logging=LoggingConfig(level=draw(log_level), format=draw(safe_text)),
        shell=ShellConfig(history_file=draw(safe_text)),
    )


@given(config=config_strategy(), suffix=st.sampled_from([".yaml", ".json"]))
@settings(max_examples=50)
def test_config_file_round_trip(config: FileFactoryConfig, suffix: str):
    """Saving a config and loading it back yields the same values."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / f"config{suffix}"
        config.save(path)

        loaded = FileFactoryConfig.from_file(path)

        assert loaded.to_dict() == config.to_dict()


def test_defaults_come_from_packaged_yaml():
    config = FileFactoryConfig()

    assert config.merge.chunk_size == 65536
    assert config.merge.report_steps == 6
    assert config.merge.timestamp_format == "%Y-%m-%d %H:%M:%S"
    assert config.merge.header_newline == "\n"
    assert config.merge.follow_symlinks is False
    assert config.logging.level == "INFO"
    assert config.shell.history_file == ".filefactory/history"


def test_partial_file_keeps_other_sections_default(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("merge:\n  report_steps: 3\n", encoding="utf-8")

    config = FileFactoryConfig.from_file(path)

    assert config.merge.report_steps == 3
    assert config.merge.chunk_size == 65536
    assert config.logging.level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FF_MERGE_CHUNK_SIZE", "1024")
    monkeypatch.setenv("FF_MERGE_HEADER_NEWLINE", "crlf")
    monkeypatch.setenv("FF_MERGE_FOLLOW_SYMLINKS", "yes")
    monkeypatch.setenv("FF_LOGGING_LEVEL", "DEBUG")

    config = load_config()

    assert config.merge.chunk_size == 1024
    assert config.merge.header_newline == "\r\n"
    assert config.merge.follow_symlinks is True
    assert config.logging.level == "DEBUG"


def test_env_overrides_can_be_skipped(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FF_MERGE_REPORT_STEPS", "2")

    assert load_config(apply_env=False).merge.report_steps == 6


@pytest.mark.parametrize("name, expected", [("crlf", "\r\n"), ("LF", "\n"), ("cr", "\r")])
def test_header_newline_names_in_file(tmp_path: Path, name: str, expected: str):
    path = tmp_path / "config.yaml"
    path.write_text(f"merge:\n  header_newline: {name}\n", encoding="utf-8")

    config = FileFactoryConfig.from_file(path)

    assert config.merge.header_newline == expected


def test_header_newline_from_file_reaches_rendered_headers(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("merge:\n  header_newline: crlf\n", encoding="utf-8")
    source = tmp_path / "a.txt"
    source.write_bytes(b"x\n")
    out = tmp_path / "out.txt"

    config = FileFactoryConfig.from_file(config_path)
    MergeEngine.from_config(config.merge).run([str(source)], str(out))

    data = out.read_bytes()
    assert data.startswith(b"/*\r\n")
    assert data.endswith(b"*/\r\n\r\nx\n")
    assert b"crlf" not in data


def test_invalid_header_newline_is_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "config.yaml"
    path.write_text("merge:\n  header_newline: tab\n", encoding="utf-8")

    with pytest.raises(ValueError):
        FileFactoryConfig.from_file(path)

    monkeypatch.setenv("FF_MERGE_HEADER_NEWLINE", "<br>")
    with pytest.raises(ValueError):
        load_config()


def test_unknown_key_raises_value_error(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("merge:\n  chunk_sise: 10\n", encoding="utf-8")

    with pytest.raises(ValueError, match="merge"):
        FileFactoryConfig.from_file(path)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileFactoryConfig.from_file(tmp_path / "absent.yaml")


def test_unsupported_format_raises(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        FileFactoryConfig.from_file(path)
