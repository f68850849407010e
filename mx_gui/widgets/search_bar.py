"""Row of search inputs built from a panel's search fields."""

from __future__ import annotations

from typing import Mapping, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLineEdit, QPushButton, QWidget

from mx_gui.schema.search import SearchField, SearchFieldKind


class SearchBar(QWidget):
    """Line edits and combo boxes with Search and Reset buttons."""

    field_edited = Signal(str, str)  # key, value
    search_clicked = Signal()
    reset_clicked = Signal()

    def __init__(
        self,
        fields: Sequence[SearchField],
        parent: object | None = None,
        *,
        search_label: str = "Search",
        reset_label: str = "Reset",
        all_label: str = "All",
    ) -> None:
        super().__init__(parent)
        self._inputs: dict[str, QLineEdit | QComboBox] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        for field in fields:
            if field.kind is SearchFieldKind.SELECT:
                layout.addWidget(self._make_combo(field, all_label))
            else:
                layout.addWidget(self._make_line_edit(field))

        self._search_btn = QPushButton(search_label)
        self._search_btn.clicked.connect(self.search_clicked)
        layout.addWidget(self._search_btn)

        self._reset_btn = QPushButton(reset_label)
        self._reset_btn.clicked.connect(self.reset_clicked)
        layout.addWidget(self._reset_btn)
        layout.addStretch()

    def _make_line_edit(self, field: SearchField) -> QLineEdit:
        line_edit = QLineEdit()
        line_edit.setPlaceholderText(field.placeholder)
        line_edit.setClearButtonEnabled(True)
        line_edit.textChanged.connect(lambda text, key=field.key: self.field_edited.emit(key, text))
        line_edit.returnPressed.connect(self.search_clicked)
        self._inputs[field.key] = line_edit
        return line_edit

    def _make_combo(self, field: SearchField, all_label: str) -> QComboBox:
        combo = QComboBox()
        combo.setToolTip(field.placeholder)
        combo.addItem(all_label, "")
        for option in field.options:
            combo.addItem(option.label, option.value)
        combo.currentIndexChanged.connect(
            lambda _index, key=field.key, box=combo: self.field_edited.emit(key, box.currentData() or "")
        )
        self._inputs[field.key] = combo
        return combo

    def value(self, key: str) -> str:
        """Current value of one input."""
        widget = self._inputs.get(key)
        if isinstance(widget, QLineEdit):
            return widget.text()
        if isinstance(widget, QComboBox):
            return widget.currentData() or ""
        return ""

    def set_values(self, values: Mapping[str, str]) -> None:
        """Show ``values`` without emitting ``field_edited``."""
        for key, widget in self._inputs.items():
            value = values.get(key, "")
            widget.blockSignals(True)
            try:
                if isinstance(widget, QLineEdit):
                    widget.setText(value)
                else:
                    index = widget.findData(value)
                    widget.setCurrentIndex(index if index >= 0 else 0)
            finally:
                widget.blockSignals(False)

    def set_enabled(self, enabled: bool) -> None:
        for widget in self._inputs.values():
            widget.setEnabled(enabled)
        self._search_btn.setEnabled(enabled)
        self._reset_btn.setEnabled(enabled)
