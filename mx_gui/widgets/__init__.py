"""Reusable Qt widgets."""

from mx_gui.widgets.search_bar import SearchBar
from mx_gui.widgets.selection_table import SelectionTable, make_cell_item

__all__ = [
    "SearchBar",
    "SelectionTable",
    "make_cell_item",
]
