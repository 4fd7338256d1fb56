"""
Sortable list widgets.

PyQt6 shell around the core reorder model: the item wrapper, the
per-item drag region and the list itself.
"""

from .sortable_item import SortableItem
from .drag_region import DragRegion
from .sortable_list import SortableListWidget

__all__ = [
    "SortableItem",
    "DragRegion",
    "SortableListWidget",
]
