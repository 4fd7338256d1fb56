"""
Application-facing configuration hooks.
"""

from .sortable_config import SortableConfig, set_sortable_config, get_sortable_config

__all__ = [
    "SortableConfig",
    "set_sortable_config",
    "get_sortable_config",
]
