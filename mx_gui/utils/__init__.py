"""Qt utilities and helpers."""

from mx_gui.utils.qt import set_table_headers, set_widget_role

__all__ = [
    "set_table_headers",
    "set_widget_role",
]
