"""Main window — single-screen catalog list with collapsible sections.

Layout:
  Top:    caption label
  Center: SectionListView (info row, then section headers and items)
"""

from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget
from PyQt6.QtCore import QSettings

from app.constants import (
    APP_NAME, APP_VERSION, LIST_CAPTION, MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH,
)
from app.core.catalog import Catalog, CatalogService
from app.core.section_list import SectionList
from app.ui.section_list_model import SectionListModel
from app.ui.widgets.section_list_view import SectionListView


class MainWindow(QMainWindow):
    """Hosts the section list for one catalog."""

    def __init__(self, catalog: Catalog | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        if catalog is None:
            catalog = CatalogService().load_or_default()
        self._catalog = catalog

        self._model = SectionListModel(
            SectionList(catalog.sections, catalog.config),
            title=catalog.title,
            parent=self,
        )
        self._model.section_toggled.connect(self._on_section_toggled)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        caption = QLabel(LIST_CAPTION.upper())
        caption.setObjectName("listCaption")
        layout.addWidget(caption)

        self._view = SectionListView()
        self._view.setModel(self._model)
        layout.addWidget(self._view, 1)

        self.setCentralWidget(central)
        self._restore_state()

    @property
    def model(self) -> SectionListModel:
        return self._model

    @property
    def view(self) -> SectionListView:
        return self._view

    def _on_section_toggled(self, section_index: int, collapsed: bool) -> None:
        self.statusBar().showMessage(
            f"{self._catalog.sections.section(section_index).name}: "
            f"{'collapsed' if collapsed else 'expanded'}",
            2000,
        )

    def closeEvent(self, event):
        self._save_state()
        super().closeEvent(event)

    def _save_state(self):
        settings = QSettings()
        settings.setValue("mainwindow/geometry", self.saveGeometry())

    def _restore_state(self):
        settings = QSettings()
        geometry = settings.value("mainwindow/geometry")
        if geometry:
            self.restoreGeometry(geometry)
