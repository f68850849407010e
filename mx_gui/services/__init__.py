"""Services used by the GUI (row sources and fetch coordination)."""

from mx_gui.services.data_source import PanelDataSource, StaticPanelDataSource, filter_rows
from mx_gui.services.panel_loader import PanelLoader

__all__ = [
    "PanelDataSource",
    "PanelLoader",
    "StaticPanelDataSource",
    "filter_rows",
]
