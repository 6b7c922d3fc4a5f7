"""Section list view — flat row view that honors per-row heights.

Rows whose size hint is zero (collapsed, unpinned items) are hidden in
place; they stay in the model. Clicking a header row toggles its section.
"""

from PyQt6.QtWidgets import QAbstractItemView, QTreeView, QWidget
from PyQt6.QtCore import QModelIndex, Qt

from app.ui.section_list_model import SectionListModel
from app.ui.widgets.section_row_delegate import SectionRowDelegate


class SectionListView(QTreeView):
    """Single-column, header-less view for SectionListModel."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setHeaderHidden(True)
        self.setRootIsDecorated(False)
        self.setItemsExpandable(False)
        self.setUniformRowHeights(False)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setItemDelegate(SectionRowDelegate(self))
        self.clicked.connect(self._on_clicked)

    def setModel(self, model) -> None:
        super().setModel(model)
        if model is not None:
            self.sync_hidden_rows(0, model.rowCount() - 1)

    def dataChanged(self, top_left, bottom_right, roles=()):
        super().dataChanged(top_left, bottom_right, roles)
        if not roles or Qt.ItemDataRole.SizeHintRole in roles:
            self.sync_hidden_rows(top_left.row(), bottom_right.row())

    def sync_hidden_rows(self, first: int, last: int) -> None:
        """Hide rows ``[first, last]`` whose height is zero, show the rest."""
        model = self.model()
        for row in range(first, last + 1):
            size = model.index(row, 0).data(Qt.ItemDataRole.SizeHintRole)
            self.setRowHidden(row, QModelIndex(), size is not None and size.height() == 0)

    def _on_clicked(self, index: QModelIndex) -> None:
        model = self.model()
        if isinstance(model, SectionListModel):
            model.handle_clicked(index)
