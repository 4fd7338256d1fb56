"""
Core reorder logic.

Pure Python with zero Qt dependencies: the reorder state machine,
hover-side detection and the hover throttle.
"""

from .exceptions import ConfigurationError
from .hover_throttle import HoverSide, HoverThrottle, classify_hover, DEFAULT_HOVER_THROTTLE_MS
from .reorder_model import ReorderModel, HoverOutcome

__all__ = [
    "ConfigurationError",
    "HoverSide",
    "HoverThrottle",
    "classify_hover",
    "DEFAULT_HOVER_THROTTLE_MS",
    "ReorderModel",
    "HoverOutcome",
]
