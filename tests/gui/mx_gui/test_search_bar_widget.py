"""Tests for SearchBar."""

import sys
from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication, QComboBox, QLineEdit

from mx_gui.schema.panels import build_itsm_spec
from mx_gui.widgets.search_bar import SearchBar

# Ensure QApplication exists
qapp = QApplication.instance()
if not qapp:
    qapp = QApplication(sys.argv)

pytestmark = pytest.mark.gui


@pytest.fixture
def bar():
    widget = SearchBar(build_itsm_spec().search_fields, all_label="All")
    yield widget
    widget.deleteLater()


def test_builds_inputs(bar: SearchBar) -> None:
    assert len(bar.findChildren(QLineEdit)) == 1
    combo = bar.findChildren(QComboBox)[0]
    assert combo.count() == 6
    assert combo.itemText(0) == "All"
    assert bar.value("scene") == ""


def test_edits_emit_field_edited(bar: SearchBar) -> None:
    handler = MagicMock()
    bar.field_edited.connect(handler)

    bar.findChildren(QLineEdit)[0].setText("release")
    bar.findChildren(QComboBox)[0].setCurrentIndex(2)

    handler.assert_any_call("name", "release")
    handler.assert_any_call("scene", "2")
    assert bar.value("scene") == "2"


def test_set_values_is_silent(bar: SearchBar) -> None:
    handler = MagicMock()
    bar.field_edited.connect(handler)

    bar.set_values({"name": "x", "scene": "5"})

    handler.assert_not_called()
    assert bar.value("name") == "x"
    assert bar.value("scene") == "5"

    bar.set_values({})
    assert bar.value("name") == ""
    assert bar.value("scene") == ""


def test_return_triggers_search(bar: SearchBar) -> None:
    handler = MagicMock()
    bar.search_clicked.connect(handler)

    bar.findChildren(QLineEdit)[0].returnPressed.emit()

    handler.assert_called_once()
