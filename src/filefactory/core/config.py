"""
Configuration module for FileFactory.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None

# Symbolic names accepted for header_newline in files and environment overrides
_NEWLINE_NAMES = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section, {})
    return section_defaults.get(key, fallback)


@dataclass
class MergeConfig:
    """Configuration for the merge engine."""

    chunk_size: int = field(default_factory=lambda: _get_default("merge", "chunk_size", 65536))
    report_steps: int = field(default_factory=lambda: _get_default("merge", "report_steps", 6))
    timestamp_format: str = field(
        default_factory=lambda: _get_default("merge", "timestamp_format", "%Y-%m-%d %H:%M:%S")
    )
    header_newline: str = field(
        default_factory=lambda: _get_default("merge", "header_newline", "\n")
    )
    follow_symlinks: bool = field(
        default_factory=lambda: _get_default("merge", "follow_symlinks", False)
    )

    def __post_init__(self) -> None:
        self.header_newline = _parse_newline(self.header_newline)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "INFO"))
    format: str = field(
        default_factory=lambda: _get_default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


@dataclass
class ShellConfig:
    """Configuration for the interactive selection shell."""

    history_file: str = field(
        default_factory=lambda: _get_default("shell", "history_file", ".filefactory/history")
    )


@dataclass
class FileFactoryConfig:
    """Main configuration class for FileFactory."""

    merge: MergeConfig = field(default_factory=MergeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "FileFactoryConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            FileFactoryConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "FileFactoryConfig":
        """Create FileFactoryConfig from a dictionary."""
        config = cls()
        sections = {"merge": MergeConfig, "logging": LoggingConfig, "shell": ShellConfig}

        for section, section_cls in sections.items():
            if section not in data:
                continue
            try:
                setattr(config, section, section_cls(**data[section]))
            except TypeError as e:
                raise ValueError(f"Invalid '{section}' configuration: {e}") from e

        return config

    def apply_env_overrides(self) -> "FileFactoryConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: FF_<SECTION>_<KEY>
        Examples:
            - FF_MERGE_CHUNK_SIZE
            - FF_MERGE_HEADER_NEWLINE (lf, crlf or cr)
            - FF_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            # Merge config
            "FF_MERGE_CHUNK_SIZE": ("merge", "chunk_size", int),
            "FF_MERGE_REPORT_STEPS": ("merge", "report_steps", int),
            "FF_MERGE_TIMESTAMP_FORMAT": ("merge", "timestamp_format", str),
            "FF_MERGE_HEADER_NEWLINE": ("merge", "header_newline", _parse_newline),
            "FF_MERGE_FOLLOW_SYMLINKS": ("merge", "follow_symlinks", _parse_bool),
            # Logging config
            "FF_LOGGING_LEVEL": ("logging", "level", str),
            "FF_LOGGING_FORMAT": ("logging", "format", str),
            # Shell config
            "FF_SHELL_HISTORY_FILE": ("shell", "history_file", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_newline(value: str) -> str:
    """Parse a symbolic newline name (lf, crlf, cr) or the characters themselves."""
    newline = _NEWLINE_NAMES.get(str(value).lower(), value)
    if newline not in _NEWLINE_NAMES.values():
        raise ValueError(f"header_newline must be one of lf, crlf, cr; got {value!r}")
    return newline


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging level and format to the root logger."""
    level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.format)


def load_config(
    config_path: Optional[Path | str] = None, apply_env: bool = True
) -> FileFactoryConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        FileFactoryConfig instance
    """
    if config_path:
        config = FileFactoryConfig.from_file(config_path)
    else:
        config = FileFactoryConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
