"""Checkable table widget that draws panel display values."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem

from mx_gui.schema.columns import ColumnDescriptor
from mx_gui.schema.display import Badge, BadgeList, Composite, DisplayValue, display_text, tooltip_text
from mx_gui.utils import set_table_headers


def make_cell_item(value: DisplayValue) -> QTableWidgetItem:
    """Build a read-only table item for a display value."""
    item = QTableWidgetItem(display_text(value))
    item.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable)
    tooltip = tooltip_text(value)
    if isinstance(value, BadgeList):
        tooltip = "\n".join(value.texts)
    if tooltip:
        item.setToolTip(tooltip)
    color = None
    if isinstance(value, Badge):
        color = value.color
    elif isinstance(value, Composite) and value.badge is not None:
        color = value.badge.color
    if color and color.startswith("#"):
        item.setForeground(QColor(color))
    return item


class SelectionTable(QTableWidget):
    """Table whose first column is a row checkbox."""

    row_check_changed = Signal(int, bool)  # row index, checked

    CHECK_COLUMN = 0

    def __init__(self, parent: object | None = None) -> None:
        super().__init__(parent)
        self._populating = False
        self.horizontalHeader().setStretchLastSection(True)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)
        self.setShowGrid(False)
        self.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.itemChanged.connect(self._on_item_changed)

    def set_columns(self, columns: Sequence[ColumnDescriptor]) -> None:
        """Apply headers and width hints from a column schema."""
        set_table_headers(self, columns)

    def set_rows(self, cells: Sequence[Sequence[DisplayValue]], checked: Sequence[bool]) -> None:
        """Replace the table contents with rendered rows and check states."""
        self._populating = True
        try:
            self.setRowCount(len(cells))
            for i, row in enumerate(cells):
                check = QTableWidgetItem()
                check.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsUserCheckable)
                check.setCheckState(self._state(checked[i] if i < len(checked) else False))
                self.setItem(i, self.CHECK_COLUMN, check)
                for j, value in enumerate(row, start=1):
                    self.setItem(i, j, make_cell_item(value))
        finally:
            self._populating = False

    def set_checked(self, checked: Sequence[bool]) -> None:
        """Sync checkbox states without emitting ``row_check_changed``."""
        self._populating = True
        try:
            for i, state in enumerate(checked):
                item = self.item(i, self.CHECK_COLUMN)
                if item is not None:
                    item.setCheckState(self._state(state))
        finally:
            self._populating = False

    def is_checked(self, row: int) -> bool:
        item = self.item(row, self.CHECK_COLUMN)
        return item is not None and item.checkState() == Qt.CheckState.Checked

    def set_loading(self, loading: bool) -> None:
        """Block row interaction while a fetch is running."""
        self.setEnabled(not loading)

    @staticmethod
    def _state(checked: bool) -> Qt.CheckState:
        return Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating or item.column() != self.CHECK_COLUMN:
            return
        self.row_check_changed.emit(item.row(), item.checkState() == Qt.CheckState.Checked)
