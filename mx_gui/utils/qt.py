"""Qt helper utilities."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtWidgets import QHeaderView, QTableWidget, QWidget

from mx_gui.schema.columns import ColumnDescriptor


def set_table_headers(table: QTableWidget, columns: Sequence[ColumnDescriptor]) -> None:
    """Apply titles, width hints and resize modes from a column schema.

    The selection column is pinned to its width; resizable columns can be
    dragged; everything else keeps Qt's default mode.
    """
    table.setColumnCount(len(columns))
    table.setHorizontalHeaderLabels([column.title for column in columns])
    header = table.horizontalHeader()
    for index, column in enumerate(columns):
        width = column.width or column.min_width
        if width:
            table.setColumnWidth(index, width)
        if column.is_selection:
            header.setSectionResizeMode(index, QHeaderView.ResizeMode.Fixed)
        elif column.resizable:
            header.setSectionResizeMode(index, QHeaderView.ResizeMode.Interactive)


def set_widget_role(widget: QWidget, role: str | None) -> None:
    """Tag a widget for the stylesheet (e.g. ``muted`` status lines)."""
    widget.setProperty("role", role)
    widget.style().unpolish(widget)
    widget.style().polish(widget)
