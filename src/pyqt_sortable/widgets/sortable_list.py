"""
Drag-and-drop sortable list of arbitrary item widgets.

Items are laid out vertically and reordered live while one is dragged.
When the drag ends the list reports a single move and snaps back to the
owner's order: the owner applies the move and calls set_items() again.
"""

import logging
from functools import partial
from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_sortable.core import ConfigurationError, HoverSide, ReorderModel
from pyqt_sortable.protocols import SortableConfig, get_sortable_config
from .drag_region import DragRegion
from .sortable_item import SortableItem

logger = logging.getLogger(__name__)


class SortableListWidget(QWidget):
    """Vertical list whose SortableItem children can be reordered by dragging.

    Emits a signal when an item is moved so the owner can update its data
    model. The owner may also pass an on_item_move callback; it runs before
    the signal is emitted.

    Usage:
        sortable = SortableListWidget(on_item_move=self._move_step)

        def _move_step(self, old_index, new_index):
            self.steps.insert(new_index, self.steps.pop(old_index))
            sortable.set_items([SortableItem(QLabel(s)) for s in self.steps])
    """

    item_moved = pyqtSignal(int, int)  # old_index, new_index

    def __init__(
        self,
        items: Optional[Sequence[SortableItem]] = None,
        on_item_move: Optional[Callable[[int, int], None]] = None,
        config: Optional[SortableConfig] = None,
        parent=None
    ):
        """Initialize sortable list widget.

        Args:
            items: Initial items, all SortableItem instances
            on_item_move: Called with (old_index, new_index) after each drag
            config: Sortable configuration, global one if None
            parent: Parent widget
        """
        super().__init__(parent)
        self._config = config or get_sortable_config()
        self._on_item_move = on_item_move
        self._items: List[SortableItem] = []
        self._regions: List[DragRegion] = []

        self._model = ReorderModel(on_item_move=self._handle_item_move)
        self._model.add_order_listener(self._apply_order)

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(*self._config.contents_margins)
        self._layout.setSpacing(self._config.spacing)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.setAcceptDrops(True)

        if items is not None:
            self.set_items(items)

    # --- Owner API ---

    def set_on_item_move(self, callback: Optional[Callable[[int, int], None]]):
        self._on_item_move = callback

    def set_items(self, items: Sequence[SortableItem]):
        """Replace the items and reset order state.

        Any drag in progress is discarded.

        Raises:
            ConfigurationError: If any item is not a SortableItem or is supplied
                twice. The previous items and order are kept.
        """
        items = list(items)
        seen = set()
        for position, item in enumerate(items):
            if not isinstance(item, SortableItem):
                raise ConfigurationError(
                    f"All SortableListWidget children must be SortableItems, "
                    f"got {type(item).__name__} at position {position}"
                )
            if id(item) in seen:
                raise ConfigurationError(f"SortableItem at position {position} was already supplied")
            seen.add(id(item))

        self._clear_regions()
        self._items = items
        self._regions = [self._create_region(index, item) for index, item in enumerate(items)]
        self._model.setup(len(items))

    def items(self) -> List[SortableItem]:
        """Items in the order the owner supplied them."""
        return list(self._items)

    def ordered_items(self) -> List[SortableItem]:
        """Items in their current display order."""
        return [self._items[index] for index in self._model.display_order]

    def display_order(self) -> List[int]:
        return self._model.display_order

    def dragging_index(self) -> Optional[int]:
        return self._model.dragging_index

    def region_at(self, physical_position: int) -> DragRegion:
        """Return the drag region currently shown at physical_position."""
        return self._regions[self._model.logical_index_at(physical_position)]

    def count(self) -> int:
        return len(self._items)

    # --- Region wiring ---

    def _create_region(self, logical_index: int, item: SortableItem) -> DragRegion:
        region = DragRegion(logical_index, item, config=self._config, parent=self)
        region.drag_started.connect(partial(self._on_drag_started, logical_index))
        region.hovered_above.connect(partial(self._on_hover, logical_index, HoverSide.ABOVE))
        region.hovered_below.connect(partial(self._on_hover, logical_index, HoverSide.BELOW))
        region.drag_ended.connect(self._on_drag_ended)
        return region

    def _clear_regions(self):
        for region in self._regions:
            # A region may still be inside its own drag loop; silence it and delete later
            region.blockSignals(True)
            self._layout.removeWidget(region)
            region.release_content()
            region.deleteLater()
        self._regions = []

    def _on_drag_started(self, logical_index: int):
        self._model.start_drag(logical_index)
        self._refresh_dragging()

    def _on_hover(self, logical_index: int, side: HoverSide):
        self._model.drag_near(logical_index, side)

    def _on_drag_ended(self):
        self._model.end_drag()

    def _handle_item_move(self, old_index: int, new_index: int):
        logger.debug(f"[SortableListWidget] Reporting move {old_index} -> {new_index}")
        if self._on_item_move is not None:
            self._on_item_move(old_index, new_index)
        self.item_moved.emit(old_index, new_index)

    # --- Layout ---

    def _apply_order(self, order: List[int]):
        for region in self._regions:
            self._layout.removeWidget(region)
        for logical_index in order:
            self._layout.addWidget(self._regions[logical_index])
        self._refresh_dragging()

    def _refresh_dragging(self):
        for region in self._regions:
            region.set_dragging(self._model.is_item_dragging(region.logical_index))

    # --- Drops on gaps between regions ---

    def _accepts(self, event) -> bool:
        return event.mimeData().hasFormat(self._config.mime_type)

    def dragEnterEvent(self, event):
        if self._accepts(event):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if self._accepts(event):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        if self._accepts(event):
            event.setDropAction(Qt.DropAction.MoveAction)
            event.accept()
        else:
            event.ignore()
