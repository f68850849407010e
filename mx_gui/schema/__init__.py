"""Declarative panel schemas: columns, display values and search fields."""

from mx_gui.schema.columns import BadgeStyle, ColumnDescriptor, read_field, selection_column
from mx_gui.schema.display import (
    Badge,
    BadgeList,
    Blank,
    Composite,
    DisplayValue,
    Placeholder,
    Text,
    TruncatedText,
    display_text,
    tooltip_text,
)
from mx_gui.schema.panels import PANEL_NAMES, PanelSpec, build_panel_specs
from mx_gui.schema.search import SearchField, SearchFieldKind, SearchOption

__all__ = [
    "Badge",
    "BadgeList",
    "BadgeStyle",
    "Blank",
    "ColumnDescriptor",
    "Composite",
    "DisplayValue",
    "PANEL_NAMES",
    "PanelSpec",
    "Placeholder",
    "SearchField",
    "SearchFieldKind",
    "SearchOption",
    "Text",
    "TruncatedText",
    "build_panel_specs",
    "display_text",
    "read_field",
    "selection_column",
    "tooltip_text",
]
