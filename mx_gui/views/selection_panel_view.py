"""View binding one table panel to its search bar and table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from mx_gui.utils import set_widget_role
from mx_gui.widgets import SearchBar, SelectionTable

if TYPE_CHECKING:
    from mx_gui.viewmodels.table_panel_vm import TablePanelViewModel


def _identity(key: str) -> str:
    return key


class SelectionPanelView(QWidget):
    """View for one selectable panel (search bar, table, status line)."""

    def __init__(
        self,
        viewmodel: "TablePanelViewModel",
        translate: Callable[[str], str] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._t = translate or _identity
        self._search_bar: SearchBar | None = None

        self._setup_ui()
        self._connect_signals()
        self._on_rows_changed(self._vm.rows)
        self._on_loading_changed(self._vm.loading)

    @property
    def table(self) -> SelectionTable:
        return self._table

    @property
    def search_bar(self) -> SearchBar | None:
        return self._search_bar

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        form = self._vm.search_form
        if form is not None:
            self._search_bar = SearchBar(
                form.fields,
                search_label=self._t("search"),
                reset_label=self._t("reset"),
                all_label=self._t("all"),
            )
            layout.addWidget(self._search_bar)

        btn_layout = QHBoxLayout()
        self._select_all_btn = QPushButton(self._t("select_all"))
        self._select_all_btn.clicked.connect(self._vm.select_all)
        btn_layout.addWidget(self._select_all_btn)

        self._clear_btn = QPushButton(self._t("clear_selection"))
        self._clear_btn.clicked.connect(self._vm.clear_selection)
        btn_layout.addWidget(self._clear_btn)
        btn_layout.addStretch()
        layout.addLayout(btn_layout)

        self._table = SelectionTable()
        self._table.set_columns(self._vm.columns)
        layout.addWidget(self._table, 1)

        self._status_label = QLabel("")
        set_widget_role(self._status_label, "muted")
        layout.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        """Connect viewmodel and widget signals."""
        self._vm.rows_changed.connect(self._on_rows_changed)
        self._vm.selection_changed.connect(self._on_selection_changed)
        self._vm.loading_changed.connect(self._on_loading_changed)
        self._table.row_check_changed.connect(self._on_row_check_changed)

        form = self._vm.search_form
        if form is not None and self._search_bar is not None:
            self._search_bar.field_edited.connect(form.set_field_value)
            self._search_bar.search_clicked.connect(form.submit)
            self._search_bar.reset_clicked.connect(self._on_reset)

    def _checked_states(self) -> list[bool]:
        return [self._vm.is_selected(row) for row in self._vm.rows]

    def _on_rows_changed(self, _rows: list) -> None:
        """Redraw all rows."""
        self._table.set_rows(self._vm.render_rows(), self._checked_states())
        self._update_status()

    def _on_selection_changed(self, _selection: list) -> None:
        self._table.set_checked(self._checked_states())
        self._update_status()

    def _on_loading_changed(self, loading: bool) -> None:
        self._table.set_loading(loading)
        self._select_all_btn.setEnabled(not loading)
        self._clear_btn.setEnabled(not loading)
        if self._search_bar is not None:
            self._search_bar.set_enabled(not loading)
        self._update_status()

    def _on_row_check_changed(self, index: int, checked: bool) -> None:
        rows = self._vm.rows
        if 0 <= index < len(rows):
            self._vm.set_selected(rows[index], checked)

    def _on_reset(self) -> None:
        """Clear the form and search again with no filters."""
        form = self._vm.search_form
        if form is None:
            return
        form.reset()
        if self._search_bar is not None:
            self._search_bar.set_values(form.get_parameters())
        form.submit()

    def _update_status(self) -> None:
        if self._vm.loading:
            self._status_label.setText(self._t("loading"))
            return
        total = len(self._vm.rows)
        self._status_label.setText(f"{self._t('selected_count')}: {self._vm.selected_count} / {total}")
