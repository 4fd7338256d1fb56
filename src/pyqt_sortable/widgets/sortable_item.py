"""Item wrapper accepted by SortableListWidget."""

from typing import Optional
from PyQt6.QtWidgets import QWidget, QVBoxLayout


class SortableItem(QWidget):
    """
    The only child type a SortableListWidget accepts.

    Wraps arbitrary owner content; the list never inspects it. Owners can
    pass a content widget or subclass and build their own layout.

    Usage:
        items = [SortableItem(QLabel(name)) for name in names]
        sortable_list.set_items(items)
    """

    def __init__(self, content: Optional[QWidget] = None, parent=None):
        super().__init__(parent)
        self._content = content

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        if content is not None:
            layout.addWidget(content)

    def content(self) -> Optional[QWidget]:
        """Return the wrapped owner widget, if any."""
        return self._content
