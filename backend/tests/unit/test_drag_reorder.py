"""Unit tests for drag-and-drop reordering."""

import pytest
from hypothesis import given, strategies as st

from cigi_web.application.components.drag_reorder import DragReorderController, move_item


def test_move_forward_lands_on_drop_index():
    assert move_item(["A", "B", "C", "D"], 0, 2) == ["B", "C", "A", "D"]


def test_move_backward_lands_on_drop_index():
    assert move_item(["A", "B", "C", "D"], 3, 1) == ["A", "D", "B", "C"]


def test_adjacent_drop_swaps_neighbours():
    assert move_item(["A", "B", "C"], 0, 1) == ["B", "A", "C"]
    assert move_item(["A", "B", "C"], 2, 1) == ["A", "C", "B"]


def test_move_reaches_both_ends():
    assert move_item(["A", "B", "C"], 0, 2) == ["B", "C", "A"]
    assert move_item(["A", "B", "C"], 2, 0) == ["C", "A", "B"]


def test_move_does_not_mutate_input():
    items = ["A", "B", "C"]
    move_item(items, 0, 2)
    assert items == ["A", "B", "C"]


@pytest.mark.parametrize("from_index,to_index", [(-1, 0), (3, 0), (0, 3)])
def test_move_rejects_out_of_range(from_index, to_index):
    with pytest.raises(IndexError):
        move_item(["A", "B", "C"], from_index, to_index)


@given(
    st.lists(st.integers(), min_size=1, max_size=20).flatmap(
        lambda items: st.tuples(
            st.just(items),
            st.integers(0, len(items) - 1),
            st.integers(0, len(items) - 1),
        )
    )
)
def test_move_is_a_permutation_placing_the_item_at_the_drop_index(case):
    items, from_index, to_index = case
    result = move_item(items, from_index, to_index)

    assert sorted(result) == sorted(items)
    assert result[to_index] == items[from_index]
    rest = items[:from_index] + items[from_index + 1 :]
    assert result[:to_index] + result[to_index + 1 :] == rest


# ── Controller ──


def test_drop_emits_reordered_list_and_clears_state():
    emitted = []
    drag = DragReorderController(emitted.append)

    drag.drag_start(0)
    drag.drag_over(2)
    assert drag.is_dragging
    result = drag.drop(["A", "B", "C", "D"], 2)

    assert result == ["B", "C", "A", "D"]
    assert emitted == [["B", "C", "A", "D"]]
    assert drag.dragged_index is None
    assert drag.drag_over_index is None


def test_drop_on_itself_is_a_no_op():
    emitted = []
    drag = DragReorderController(emitted.append)

    drag.drag_start(1)
    assert drag.drop(["A", "B", "C"], 1) is None
    assert emitted == []
    assert not drag.is_dragging


def test_drop_without_drag_start_is_a_no_op():
    emitted = []
    drag = DragReorderController(emitted.append)

    assert drag.drop(["A", "B"], 0) is None
    assert emitted == []


def test_drop_with_stale_index_is_ignored():
    emitted = []
    drag = DragReorderController(emitted.append)

    drag.drag_start(5)
    assert drag.drop(["A", "B"], 0) is None
    assert emitted == []


def test_drag_end_cancels_gesture():
    emitted = []
    drag = DragReorderController(emitted.append)

    drag.drag_start(0)
    drag.drag_over(1)
    drag.drag_end()

    assert drag.dragged_index is None
    assert drag.drag_over_index is None
    assert drag.drop(["A", "B"], 1) is None
