"""Pointer-drag reordering of an ordered list.

The dragged element lands exactly at the index it was dropped on: after
removing it from position ``from_index``, the remaining elements shift left
by one past that position, and inserting at ``to_index`` places the element
so that ``result[to_index] is items[from_index]``. This lets a drag reach
both ends of the list and makes adjacent drops swap neighbours.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def move_item(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Return a new list with the element at ``from_index`` moved to ``to_index``.

    A pure permutation: same elements, same length. Raises ``IndexError`` when
    either index is outside the list.
    """
    size = len(items)
    if not 0 <= from_index < size:
        raise IndexError(f"from_index {from_index} out of range for {size} items")
    if not 0 <= to_index < size:
        raise IndexError(f"to_index {to_index} out of range for {size} items")

    reordered = list(items)
    moved = reordered.pop(from_index)
    reordered.insert(to_index, moved)
    return reordered


class DragReorderController(Generic[T]):
    """Tracks one drag gesture and emits the reordered list on drop.

    ``drag_over_index`` is a visual hint only; correctness depends on
    ``dragged_index`` alone.
    """

    def __init__(self, on_change: Callable[[list[T]], object]):
        self._on_change = on_change
        self.dragged_index: int | None = None
        self.drag_over_index: int | None = None

    @property
    def is_dragging(self) -> bool:
        return self.dragged_index is not None

    def drag_start(self, index: int) -> None:
        self.dragged_index = index

    def drag_over(self, index: int) -> None:
        self.drag_over_index = index

    def drag_leave(self) -> None:
        self.drag_over_index = None

    def drag_end(self) -> None:
        """Gesture cancelled (dropped outside any target)."""
        self._clear()

    def drop(self, items: Sequence[T], drop_index: int) -> list[T] | None:
        """Finish the gesture on ``drop_index``.

        Returns the emitted list, or None when the drop was a no-op (nothing
        dragged, dropped onto itself, or indexes no longer valid for
        ``items``). Transient drag state is cleared either way.
        """
        dragged = self.dragged_index
        self._clear()

        if dragged is None or dragged == drop_index:
            return None
        if not (0 <= dragged < len(items) and 0 <= drop_index < len(items)):
            logger.debug("Ignoring drop %s -> %s on %d items", dragged, drop_index, len(items))
            return None

        reordered = move_item(items, dragged, drop_index)
        self._on_change(reordered)
        return reordered

    def _clear(self) -> None:
        self.dragged_index = None
        self.drag_over_index = None
