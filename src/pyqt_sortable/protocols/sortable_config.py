"""Base configuration class for sortable lists.

Provides hooks for applications to customize drag-and-drop behavior.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from pyqt_sortable.core.hover_throttle import DEFAULT_HOVER_THROTTLE_MS


@dataclass
class SortableConfig:
    """Base configuration for sortable list behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        hover_throttle_ms: Minimum gap between accepted hovers per region
        hidden_opacity: Opacity of the region being dragged
        mime_type: MIME type carried by drags started from a region
        spacing: Vertical spacing between regions
        contents_margins: Margins of the list layout (left, top, right, bottom)
    """

    hover_throttle_ms: int = DEFAULT_HOVER_THROTTLE_MS
    hidden_opacity: float = 0.0
    mime_type: str = "application/x-pyqt-sortable-item"
    spacing: int = 0
    contents_margins: Tuple[int, int, int, int] = (0, 0, 0, 0)


# Global config instance (set by application)
_sortable_config: Optional[SortableConfig] = None


def set_sortable_config(config: Optional[SortableConfig]) -> None:
    """Set the global sortable list configuration.

    Args:
        config: SortableConfig instance, or None to restore defaults
    """
    global _sortable_config
    _sortable_config = config


def get_sortable_config() -> SortableConfig:
    """Get the current sortable list configuration.

    Returns:
        Current SortableConfig or default if not set
    """
    if _sortable_config is None:
        return SortableConfig()
    return _sortable_config
