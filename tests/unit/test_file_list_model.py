"""
Unit tests for FileListModel selection and history.
"""

from pathlib import Path

import pytest

from filefactory.core.file_list import FileListModel


@pytest.fixture
def paths(tmp_path: Path) -> dict[str, str]:
    (tmp_path / "a.txt").write_text("a\n")
    (tmp_path / "b.txt").write_text("b\n")
    (tmp_path / "dir").mkdir()
    return {
        "a": str(tmp_path / "a.txt"),
        "b": str(tmp_path / "b.txt"),
        "dir": str(tmp_path / "dir"),
        "missing": str(tmp_path / "missing.txt"),
    }


class TestAdd:
    def test_add_keeps_insertion_order(self, paths):
        model = FileListModel()

        assert model.add(paths["b"])
        assert model.add(paths["dir"])
        assert model.add(paths["a"])

        assert model.snapshot() == (paths["b"], paths["dir"], paths["a"])

    def test_duplicate_is_ignored_without_history(self, paths):
        model = FileListModel()
        model.add(paths["a"])
        model.undo()
        model.redo()

        assert not model.add(paths["a"])
        assert model.snapshot() == (paths["a"],)
        assert model.can_undo
        assert model.undo()
        assert not model.can_undo

    def test_missing_path_is_ignored_without_history(self, paths):
        model = FileListModel()

        assert not model.add(paths["missing"])
        assert len(model) == 0
        assert not model.can_undo

    def test_add_clears_redo(self, paths):
        model = FileListModel()
        model.add(paths["a"])
        model.undo()
        assert model.can_redo

        model.add(paths["b"])

        assert not model.can_redo
        assert not model.redo()

    def test_add_many_is_one_step(self, paths):
        model = FileListModel()

        accepted = model.add_many([paths["a"], paths["missing"], paths["b"], paths["a"]])

        assert accepted == [paths["a"], paths["b"]]
        assert model.undo()
        assert len(model) == 0
        assert not model.can_undo

    def test_add_many_with_nothing_accepted_records_nothing(self, paths):
        model = FileListModel()

        assert model.add_many([paths["missing"]]) == []
        assert not model.can_undo

    def test_initial_paths_are_filtered_and_not_in_history(self, paths):
        model = FileListModel([paths["a"], paths["a"], paths["missing"]])

        assert model.snapshot() == (paths["a"],)
        assert not model.can_undo


class TestRemove:
    def test_remove_selected(self, paths):
        model = FileListModel()
        model.add_many([paths["a"], paths["b"], paths["dir"]])

        removed = model.remove_selected([paths["b"], paths["missing"]])

        assert removed == 1
        assert model.snapshot() == (paths["a"], paths["dir"])

    def test_remove_without_match_still_records_history(self, paths):
        model = FileListModel()
        model.add(paths["a"])
        model.undo()
        model.redo()

        assert model.remove_selected([paths["b"]]) == 0
        assert not model.can_redo

        assert model.undo()
        assert model.snapshot() == (paths["a"],)

    def test_clear_is_undoable(self, paths):
        model = FileListModel()
        model.add_many([paths["a"], paths["b"]])

        model.clear()
        assert len(model) == 0

        assert model.undo()
        assert model.snapshot() == (paths["a"], paths["b"])

    def test_clear_on_empty_records_nothing(self):
        model = FileListModel()

        model.clear()

        assert not model.can_undo


class TestHistory:
    def test_undo_redo_walk(self, paths):
        model = FileListModel()
        model.add(paths["a"])
        model.add(paths["b"])

        assert model.undo()
        assert model.snapshot() == (paths["a"],)
        assert model.undo()
        assert model.snapshot() == ()
        assert not model.undo()

        assert model.redo()
        assert model.redo()
        assert model.snapshot() == (paths["a"], paths["b"])
        assert not model.redo()

    def test_snapshot_is_independent_of_later_mutation(self, paths):
        model = FileListModel()
        model.add(paths["a"])
        snap = model.snapshot()

        model.add(paths["b"])

        assert snap == (paths["a"],)

    def test_container_protocol(self, paths):
        model = FileListModel()
        model.add_many([paths["a"], paths["b"]])

        assert paths["a"] in model
        assert paths["missing"] not in model
        assert list(model) == [paths["a"], paths["b"]]
        assert len(model) == 2
