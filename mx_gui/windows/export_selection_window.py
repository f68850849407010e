"""Export selection window with sidebar navigation between panels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mx_gui.views import SelectionPanelView

if TYPE_CHECKING:
    from mx_gui.app import ServiceContainer


class ExportSelectionWindow(QMainWindow):
    """Window hosting one selection view per registry panel."""

    def __init__(self, services: "ServiceContainer", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.services = services
        self._views: dict[str, SelectionPanelView] = {}
        self._sections: list[str] = []

        self._setup_ui()
        self._setup_views()
        self._connect_signals()
        self._update_counts()

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        self.setWindowTitle(self.services.translator("window_title"))
        self.setMinimumSize(1100, 700)

        central = QWidget()
        central.setObjectName("mainRoot")
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        sidebar_box = QWidget()
        sidebar_layout = QVBoxLayout(sidebar_box)
        sidebar_layout.setContentsMargins(0, 0, 0, 8)

        self._sidebar = QListWidget()
        self._sidebar.setObjectName("sidebar")
        self._sidebar.setFixedWidth(180)
        self._sidebar.setSpacing(2)
        sidebar_layout.addWidget(self._sidebar, 1)

        self._refresh_btn = QPushButton(self.services.translator("refresh"))
        sidebar_layout.addWidget(self._refresh_btn)

        self._stack = QStackedWidget()

        main_layout.addWidget(sidebar_box)
        main_layout.addWidget(self._stack, 1)

    def _setup_views(self) -> None:
        """Create one view per panel."""
        registry = self.services.registry
        for panel in registry:
            view = SelectionPanelView(panel, self.services.translator)
            self._views[panel.name] = view
            self._sections.append(panel.name)
            self._stack.addWidget(view)

            item = QListWidgetItem(panel.title)
            item.setData(Qt.ItemDataRole.UserRole, panel.name)
            self._sidebar.addItem(item)
        if self._sections:
            self._sidebar.setCurrentRow(0)

    def _connect_signals(self) -> None:
        """Connect UI and loader signals."""
        self._sidebar.currentRowChanged.connect(self._on_section_changed)
        self._refresh_btn.clicked.connect(self._on_refresh)
        for panel in self.services.registry:
            panel.selection_changed.connect(self._update_counts)
            panel.rows_changed.connect(self._update_counts)
        loader = self.services.loader
        loader.load_failed.connect(self._on_load_failed)

    def _on_section_changed(self, row: int) -> None:
        """Handle sidebar selection change."""
        if 0 <= row < len(self._sections):
            self._stack.setCurrentIndex(row)

    def _on_refresh(self) -> None:
        """Reload the panel currently shown."""
        name = self.current_section()
        if name is not None:
            self.services.loader.load(self.services.registry.panel(name))

    def _on_load_failed(self, panel: str, message: str) -> None:
        self.statusBar().showMessage(f"{panel}: {message}", 10000)

    def _update_counts(self, *_args: object) -> None:
        """Show per-panel selection counts in sidebar labels and status bar."""
        counts = self.services.registry.selection_counts()
        for i, name in enumerate(self._sections):
            item = self._sidebar.item(i)
            title = self.services.registry.panel(name).title
            count = counts.get(name, 0)
            item.setText(f"{title} ({count})" if count else title)
        summary = ", ".join(f"{name}: {count}" for name, count in counts.items())
        self.statusBar().showMessage(summary)

    def current_section(self) -> str | None:
        row = self._sidebar.currentRow()
        if 0 <= row < len(self._sections):
            return self._sections[row]
        return None

    def get_view(self, key: str) -> SelectionPanelView | None:
        """Get a view by its panel name."""
        return self._views.get(key)

    def select_section(self, key: str) -> None:
        """Programmatically select a section by panel name."""
        if key in self._sections:
            self._sidebar.setCurrentRow(self._sections.index(key))

    def closeEvent(self, event: object) -> None:
        """Stop outstanding fetches before closing."""
        self.services.loader.shutdown()
        event.accept()  # type: ignore
