"""GUI views (Qt widgets for each panel)."""

from mx_gui.views.selection_panel_view import SelectionPanelView

__all__ = [
    "SelectionPanelView",
]
