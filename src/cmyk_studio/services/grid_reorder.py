"""
CMYK Portrait Studio - Archive Grid Reordering

Drag-to-reorder for the archive grid. One gesture is:

    drag_start(index)   the card picked up
    drag_enter(index)   every card the pointer crosses (last one wins)
    drop(items)         relocate the picked card to the last entered slot

The relocation removes the element and reinserts it, so the relative order
of all other elements is preserved (it is not a swap).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

STATE_DRAGGING = 'dragging'
STATE_DRAG_OVER = 'drag-over'


@dataclass
class GridOrderState:
    """Indices for one drag gesture (None when unset)"""
    from_index: Optional[int] = None
    to_index: Optional[int] = None

    def reset(self):
        self.from_index = None
        self.to_index = None


@dataclass(frozen=True)
class ArchiveItem:
    """One card in the archive grid"""
    id: str
    url: str
    title: str


def relocate(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Move one element from from_index to to_index in a new list"""
    updated = list(items)
    moved = updated.pop(from_index)
    updated.insert(to_index, moved)
    return updated


class GridReorderController:
    """Tracks a card drag and reorders the list on drop"""

    def __init__(self):
        self.state = GridOrderState()

    def drag_start(self, index: int):
        self.state.from_index = index

    def drag_enter(self, index: int):
        self.state.to_index = index

    def drop(self, items: Sequence[T]) -> List[T]:
        """Finish the gesture

        Args:
            items: Current list order (not modified)

        Returns:
            New list with the dragged element relocated, or an unchanged copy
            if either index is unset or both are equal
        """
        from_index, to_index = self.state.from_index, self.state.to_index
        self.state.reset()

        if from_index is None or to_index is None or from_index == to_index:
            return list(items)
        if not (0 <= from_index < len(items) and 0 <= to_index < len(items)):
            logger.warning(f"Ignoring drop outside grid: {from_index} -> {to_index} ({len(items)} items)")
            return list(items)

        logger.debug(f"Reordered archive: {from_index} -> {to_index}")
        return relocate(items, from_index, to_index)

    def item_state(self, index: int) -> Optional[str]:
        """Highlight state of a card during the gesture"""
        if self.state.from_index == index:
            return STATE_DRAGGING
        if self.state.to_index == index:
            return STATE_DRAG_OVER
        return None

    @staticmethod
    def position_label(index: int) -> str:
        return f"Position: {index + 1}"
