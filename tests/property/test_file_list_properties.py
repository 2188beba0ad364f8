"""
Property-based tests for FileListModel history.
"""

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from filefactory.core.file_list import FileListModel

NAMES = ["a", "b", "c", "d", "missing"]

operation = st.one_of(
    st.tuples(st.just("add"), st.sampled_from(NAMES)),
    st.tuples(st.just("add_many"), st.lists(st.sampled_from(NAMES), max_size=4)),
    st.tuples(st.just("remove"), st.lists(st.sampled_from(NAMES), max_size=3)),
    st.tuples(st.just("clear"), st.none()),
)


def _apply(model: FileListModel, op: tuple, root: Path) -> None:
    kind, arg = op
    if kind == "add":
        model.add(str(root / arg))
    elif kind == "add_many":
        model.add_many([str(root / name) for name in arg])
    elif kind == "remove":
        model.remove_selected([str(root / name) for name in arg])
    else:
        model.clear()


@given(ops=st.lists(operation, max_size=15))
@settings(max_examples=100)
def test_undo_all_then_redo_all_restores_states(ops: list[tuple]):
    """
    For any sequence of mutations, the selection stays duplicate-free,
    never contains missing paths, and undoing every recorded step then
    redoing them walks back through exactly the same states.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        for name in NAMES[:-1]:
            (root / name).write_text(name)

        model = FileListModel()
        for op in ops:
            _apply(model, op, root)

            current = model.snapshot()
            assert len(set(current)) == len(current)
            assert str(root / "missing") not in current

        final = model.snapshot()
        undone = [final]
        while model.undo():
            undone.append(model.snapshot())
        assert undone[-1] == ()

        redone = [model.snapshot()]
        while model.redo():
            redone.append(model.snapshot())
        assert redone == list(reversed(undone))
        assert model.snapshot() == final
