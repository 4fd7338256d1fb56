"""Hover-side detection with a per-region throttle."""

import time
from enum import Enum
from typing import Callable, Optional

# --- Module-level constants ---
DEFAULT_HOVER_THROTTLE_MS = 100  # Minimum gap between accepted hovers


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class HoverSide(Enum):
    """Which half of a sibling the cursor is over."""
    ABOVE = 0
    BELOW = 1

    @property
    def offset(self) -> int:
        # Insert offset relative to the hovered sibling
        return self.value


def classify_hover(cursor_y: float, top: float, bottom: float) -> HoverSide:
    """Return ABOVE if the cursor is strictly above the element's midpoint.

    At or past the midpoint counts as BELOW, so zero-height geometry
    resolves to BELOW.
    """
    halfway_y = (top + bottom) / 2
    if cursor_y >= halfway_y:
        return HoverSide.BELOW
    return HoverSide.ABOVE


class HoverThrottle:
    """
    Leading-edge throttle for hover events of a single drag region.

    Accepts an event only if interval_ms has elapsed since the previous
    accepted one. The window starts at construction time. clock returns
    milliseconds.

    Usage:
        self._throttle = HoverThrottle(interval_ms=100)

        def dragMoveEvent(self, event):
            side = self._throttle.classify(y, 0, self.height())
            if side is None:
                return  # Dropped
    """

    def __init__(
        self,
        interval_ms: int = DEFAULT_HOVER_THROTTLE_MS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._interval_ms = interval_ms
        self._clock = clock or monotonic_ms
        self._last_accepted_ms: Optional[float] = self._clock()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def accept(self) -> bool:
        """Return True and record the time if the event passes the throttle."""
        now = self._clock()
        if self._last_accepted_ms is not None and now - self._last_accepted_ms < self._interval_ms:
            return False
        self._last_accepted_ms = now
        return True

    def reset(self):
        """Forget the last acceptance so the next event passes."""
        self._last_accepted_ms = None

    def classify(self, cursor_y: float, top: float, bottom: float) -> Optional[HoverSide]:
        """Throttle, then classify. Returns None when the event is dropped."""
        if not self.accept():
            return None
        return classify_hover(cursor_y, top, bottom)
