"""Qt list model over a SectionList.

Row 0 is the fixed info row (catalog title). Rows 1.. are the items
region: model row ``r`` is flat row ``r - 1`` of the SectionList. Only
this adapter knows about the offset.
"""

from __future__ import annotations

from PyQt6.QtCore import QAbstractListModel, QModelIndex, QSize, Qt, pyqtSignal

from app.constants import INFO_ROW_HEIGHT
from app.core.section_list import RowKind, SectionList, badge_text

INFO_ROW = 0
_ITEMS_OFFSET = 1


class SectionListModel(QAbstractListModel):
    """Flat Qt model: info row followed by section headers and items."""

    ROW_KIND_ROLE = Qt.ItemDataRole.UserRole + 1       # "info" / "header" / "item"
    SECTION_INDEX_ROLE = Qt.ItemDataRole.UserRole + 2  # -1 for the info row
    COLLAPSED_ROLE = Qt.ItemDataRole.UserRole + 3
    BADGE_ROLE = Qt.ItemDataRole.UserRole + 4

    # (section_index, collapsed) after a header toggle
    section_toggled = pyqtSignal(int, bool)

    def __init__(self, rows: SectionList, title: str = "", parent=None):
        super().__init__(parent)
        self._rows = rows
        self._title = title

    @property
    def section_list(self) -> SectionList:
        return self._rows

    # ------------------------------------------------------------------
    # QAbstractListModel
    # ------------------------------------------------------------------

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return _ITEMS_OFFSET + self._rows.total_flat_rows()

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < self.rowCount()):
            return None

        if index.row() == INFO_ROW:
            return self._info_data(role)

        flat = index.row() - _ITEMS_OFFSET
        content = self._rows.content_for_row(flat)

        if role == Qt.ItemDataRole.DisplayRole:
            return content.text
        if role == Qt.ItemDataRole.SizeHintRole:
            return QSize(0, round(self._rows.height_for_row(flat)))
        if role == self.ROW_KIND_ROLE:
            return content.kind.value
        if role == self.SECTION_INDEX_ROLE:
            return content.section_index
        if role == self.COLLAPSED_ROLE:
            return self._rows.model.section(content.section_index).collapsed
        if role == self.BADGE_ROLE:
            if content.kind is not RowKind.HEADER:
                return ""
            section = self._rows.model.section(content.section_index)
            return badge_text(section, self._rows.config)
        return None

    def _info_data(self, role):
        if role == Qt.ItemDataRole.DisplayRole:
            return self._title
        if role == Qt.ItemDataRole.SizeHintRole:
            return QSize(0, round(INFO_ROW_HEIGHT))
        if role == self.ROW_KIND_ROLE:
            return "info"
        if role == self.SECTION_INDEX_ROLE:
            return -1
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled

    # ------------------------------------------------------------------
    # Toggle protocol
    # ------------------------------------------------------------------

    def is_header(self, index: QModelIndex) -> bool:
        return index.isValid() and self.data(index, self.ROW_KIND_ROLE) == RowKind.HEADER.value

    def handle_clicked(self, index: QModelIndex) -> None:
        """Toggle the section when a header row is clicked; ignore other rows."""
        if self.is_header(index):
            self.toggle_section(self.data(index, self.SECTION_INDEX_ROLE))

    def toggle_section(self, section_index: int) -> tuple[int, int]:
        """Toggle one section and refresh exactly its rows.

        Returns:
            The closed model-row range that was refreshed.

        Raises:
            IndexError: If *section_index* is not a valid section.
        """
        start, end = self._rows.on_toggle_requested(section_index)
        first, last = start + _ITEMS_OFFSET, end + _ITEMS_OFFSET
        self.refresh_rows(first, last)
        self.section_toggled.emit(
            section_index, self._rows.model.section(section_index).collapsed
        )
        return first, last

    def refresh_rows(self, first: int, last: int, animated: bool = True) -> None:
        """Re-query content and height for model rows ``[first, last]``.

        *animated* is accepted for the view's benefit and has no effect here.
        """
        self.dataChanged.emit(
            self.index(first),
            self.index(last),
            [
                Qt.ItemDataRole.DisplayRole,
                Qt.ItemDataRole.SizeHintRole,
                self.COLLAPSED_ROLE,
                self.BADGE_ROLE,
            ],
        )
