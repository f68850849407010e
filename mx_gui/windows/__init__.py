"""Top-level application windows."""

from mx_gui.windows.export_selection_window import ExportSelectionWindow

__all__ = ["ExportSelectionWindow"]
