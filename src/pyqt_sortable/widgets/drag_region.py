"""
Per-item drag region for sortable lists.

Turns raw Qt mouse and drag events on one item into the semantic signals
the list consumes: drag started, hovered above, hovered below, drag ended.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QMimeData, QPoint, QTimer, pyqtSignal
from PyQt6.QtGui import QDrag
from PyQt6.QtWidgets import QApplication, QGraphicsOpacityEffect, QVBoxLayout, QWidget

from pyqt_sortable.core import HoverSide, HoverThrottle
from pyqt_sortable.protocols import SortableConfig, get_sortable_config

logger = logging.getLogger(__name__)


class DragRegion(QWidget):
    """Draggable wrapper around one SortableItem.

    Holds no order state. The owning list binds each signal to the region's
    logical index and drives the reorder model from there.
    """

    drag_started = pyqtSignal()
    hovered_above = pyqtSignal()
    hovered_below = pyqtSignal()
    drag_ended = pyqtSignal()

    def __init__(
        self,
        logical_index: int,
        content: QWidget,
        config: Optional[SortableConfig] = None,
        throttle: Optional[HoverThrottle] = None,
        parent=None
    ):
        """Initialize drag region.

        Args:
            logical_index: Position of content in the owner's sequence
            content: Widget to wrap (reparented into this region)
            config: Sortable configuration, global one if None
            throttle: Hover throttle, one built from config if None
            parent: Parent widget
        """
        super().__init__(parent)
        self.logical_index = logical_index
        self._content = content
        self._config = config or get_sortable_config()
        self._throttle = throttle or HoverThrottle(interval_ms=self._config.hover_throttle_ms)
        self._press_pos: Optional[QPoint] = None
        self._is_dragging = False

        # Pending drag start; still active after exec() means the drag never got going
        self._start_timer = QTimer(self)
        self._start_timer.setSingleShot(True)
        self._start_timer.setInterval(0)
        self._start_timer.timeout.connect(self._emit_drag_started)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(content)
        content.show()

        self.setAcceptDrops(True)

    def content(self) -> QWidget:
        return self._content

    def throttle(self) -> HoverThrottle:
        return self._throttle

    def release_content(self) -> QWidget:
        """Detach the wrapped widget so it survives this region's deletion."""
        self.layout().removeWidget(self._content)
        self._content.setParent(None)
        return self._content

    # --- Dragging flag (cosmetic) ---

    def is_dragging(self) -> bool:
        return self._is_dragging

    def set_dragging(self, dragging: bool):
        """Hide the region while it is the item being dragged."""
        if dragging == self._is_dragging:
            return
        self._is_dragging = dragging

        if dragging:
            effect = QGraphicsOpacityEffect(self)
            effect.setOpacity(self._config.hidden_opacity)
            self.setGraphicsEffect(effect)
        else:
            self.setGraphicsEffect(None)

    # --- Drag source ---

    def mousePressEvent(self, event):
        """Remember where a potential drag begins."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        """Start a drag once the cursor moves past the drag distance."""
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return

        distance = (event.position().toPoint() - self._press_pos).manhattanLength()
        if distance < QApplication.startDragDistance():
            super().mouseMoveEvent(event)
            return

        self._exec_drag(self._press_pos)
        self._press_pos = None

    def mouseReleaseEvent(self, event):
        self._press_pos = None
        super().mouseReleaseEvent(event)

    def _exec_drag(self, hot_spot: QPoint):
        mime_data = QMimeData()
        mime_data.setData(self._config.mime_type, str(self.logical_index).encode())

        drag = QDrag(self)
        drag.setMimeData(mime_data)
        drag.setPixmap(self.grab())
        drag.setHotSpot(hot_spot)

        self._schedule_drag_started()

        # Blocks in a nested event loop until drop or cancel
        result = drag.exec(Qt.DropAction.MoveAction)

        if self._start_timer.isActive():
            # Ended before the start was delivered: report neither
            self._start_timer.stop()
            logger.debug(f"[DragRegion] Drag of item {self.logical_index} aborted before start: {result}")
            return

        logger.debug(f"[DragRegion] Drag of item {self.logical_index} finished: {result}")
        self.drag_ended.emit()

    def _schedule_drag_started(self):
        # Next event-loop turn, so hiding this region doesn't alter the captured drag pixmap
        self._start_timer.start()

    def _emit_drag_started(self):
        self.drag_started.emit()

    # --- Drop target ---

    def _accepts(self, event) -> bool:
        return event.mimeData().hasFormat(self._config.mime_type)

    def dragEnterEvent(self, event):
        if self._accepts(event):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        """Report which half of this region the cursor is over, throttled."""
        if not self._accepts(event):
            event.ignore()
            return
        event.acceptProposedAction()
        self.report_hover(event.position().y(), 0, self.height())

    def dropEvent(self, event):
        if self._accepts(event):
            event.setDropAction(Qt.DropAction.MoveAction)
            event.accept()
        else:
            event.ignore()

    def report_hover(self, cursor_y: float, top: float, bottom: float) -> Optional[HoverSide]:
        """Feed one pointer-over position through the throttle and emit its side.

        Returns:
            Side emitted, or None when the event fell inside the throttle window
        """
        side = self._throttle.classify(cursor_y, top, bottom)
        if side is HoverSide.ABOVE:
            self.hovered_above.emit()
        elif side is HoverSide.BELOW:
            self.hovered_below.emit()
        return side
