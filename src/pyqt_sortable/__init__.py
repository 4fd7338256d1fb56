"""
pyqt-sortable: drag-to-reorder vertical lists for PyQt6.

Owners hand the list a sequence of SortableItem widgets and receive one
(old_index, new_index) move per completed drag.

Architecture:
- Core: Pure Python reorder state machine, hover detection and throttle
- Protocols: Application-level configuration hooks
- Widgets: PyQt6 list, drag region and item wrapper

Key Features:
- Live reordering while dragging, one committed move on drop
- Half-height hover detection, throttled per item
- Owner stays the source of truth: order resets after every drag
"""

__version__ = "0.1.0"

from .core import ConfigurationError, HoverOutcome, HoverSide, HoverThrottle, ReorderModel
from .protocols import SortableConfig, get_sortable_config, set_sortable_config

__all__ = [
    "__version__",
    "ConfigurationError",
    "HoverOutcome",
    "HoverSide",
    "HoverThrottle",
    "ReorderModel",
    "SortableConfig",
    "get_sortable_config",
    "set_sortable_config",
]
