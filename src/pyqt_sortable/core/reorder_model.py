"""
Reorder state machine for drag-sorted lists.

Tracks the live display order of a list while one item is dragged over its
siblings, and reports a single (old_index, new_index) move when the drag ends.
Pure Python; the Qt shell in pyqt_sortable.widgets drives it.
"""

import logging
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .exceptions import ConfigurationError
from .hover_throttle import HoverSide

logger = logging.getLogger(__name__)

ItemMoveCallback = Callable[[int, int], None]
OrderListener = Callable[[List[int]], None]


class HoverOutcome(Enum):
    """Result of feeding a hover signal into the model."""
    APPLIED = auto()
    NO_ACTIVE_DRAG = auto()
    SELF_HOVER = auto()


class ReorderModel:
    """
    Owns the display order and the dragging marker.

    Indices handed in and out are logical indices: positions in the owner's
    sequence at the most recent setup(). display_order maps physical
    position to logical index.

    Usage:
        model = ReorderModel(3, on_item_move=owner.move_item)
        model.start_drag(0)
        model.drag_near(2, HoverSide.BELOW)   # display_order -> [1, 2, 0]
        model.end_drag()                      # owner.move_item(0, 2)
    """

    def __init__(self, item_count: int = 0, on_item_move: Optional[ItemMoveCallback] = None):
        self.on_item_move = on_item_move
        self._order_listeners: List[OrderListener] = []
        self._display_order: List[int] = []
        self._dragging_index: Optional[int] = None
        self.setup(item_count)

    # --- State access ---

    @property
    def display_order(self) -> List[int]:
        return list(self._display_order)

    @property
    def dragging_index(self) -> Optional[int]:
        return self._dragging_index

    @property
    def item_count(self) -> int:
        return len(self._display_order)

    @property
    def is_dragging(self) -> bool:
        return self._dragging_index is not None

    def is_item_dragging(self, logical_index: int) -> bool:
        return self._dragging_index == logical_index

    def logical_index_at(self, physical_position: int) -> int:
        return self._display_order[physical_position]

    def physical_position_of(self, logical_index: int) -> int:
        return self._display_order.index(logical_index)

    def add_order_listener(self, listener: OrderListener):
        """Register a callable invoked with the new display order on every change."""
        self._order_listeners.append(listener)

    # --- Transitions ---

    def setup(self, item_count: int):
        """Reset to the identity order with no drag in progress.

        Called at construction and whenever the owner supplies a new
        sequence. Any in-flight drag is discarded.
        """
        if item_count < 0:
            raise ConfigurationError(f"Item count must be non-negative, got {item_count}")

        if self._dragging_index is not None:
            logger.debug(f"[ReorderModel] Setup discards drag of item {self._dragging_index}")

        self._display_order = list(range(item_count))
        self._dragging_index = None
        self._notify_order_changed()

    def start_drag(self, logical_index: int):
        """Idle -> Dragging(logical_index). Display order is unchanged."""
        if not 0 <= logical_index < self.item_count:
            raise IndexError(f"Logical index {logical_index} out of range for {self.item_count} items")

        logger.debug(f"[ReorderModel] Drag started on item {logical_index}")
        self._dragging_index = logical_index

    def drag_near(self, logical_index: int, side: HoverSide) -> HoverOutcome:
        """Move the dragged item next to logical_index, on the given side.

        The hovered item's position among the non-dragged items is the pivot;
        the dragged item's previous position does not matter.
        """
        dragging_index = self._dragging_index

        if dragging_index is None:
            logger.debug(f"[ReorderModel] Hover on item {logical_index} ignored: no active drag")
            return HoverOutcome.NO_ACTIVE_DRAG

        if logical_index == dragging_index:
            return HoverOutcome.SELF_HOVER

        rest = [index for index in self._display_order if index != dragging_index]
        pivot = rest.index(logical_index) + side.offset

        self._display_order = rest[:pivot] + [dragging_index] + rest[pivot:]
        self._notify_order_changed()
        return HoverOutcome.APPLIED

    def end_drag(self) -> Optional[Tuple[int, int]]:
        """Dragging(X) -> Idle. Resets state, then reports the move to the owner.

        Returns:
            (old_index, new_index), or None when no drag was active
        """
        dragging_index = self._dragging_index

        if dragging_index is None:
            logger.debug("[ReorderModel] Drag end ignored: no active drag")
            return None

        new_index = self._display_order.index(dragging_index)

        # The owner is the source of truth from here on
        self.setup(self.item_count)

        logger.debug(f"[ReorderModel] Item moved: {dragging_index} -> {new_index}")
        if self.on_item_move is not None:
            self.on_item_move(dragging_index, new_index)

        return dragging_index, new_index

    def _notify_order_changed(self):
        order = self.display_order
        for listener in self._order_listeners:
            listener(order)
