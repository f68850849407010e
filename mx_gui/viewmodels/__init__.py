"""ViewModels exposing Qt signals for views."""

from mx_gui.viewmodels.search_form_vm import SearchFormViewModel
from mx_gui.viewmodels.table_panel_vm import TablePanelViewModel
from mx_gui.viewmodels.registry_vm import SelectionTableRegistry

__all__ = [
    "SearchFormViewModel",
    "TablePanelViewModel",
    "SelectionTableRegistry",
]
