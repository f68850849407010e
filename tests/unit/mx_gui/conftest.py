"""Pytest configuration for mx_gui tests."""

from pathlib import Path

from tests.helpers.optional_imports import module_available

HAS_PYSIDE6 = module_available("PySide6")

# Modules that only touch the schema and settings layers.
QT_FREE = {
    "test_dependencies.py",
    "test_display.py",
    "test_columns.py",
    "test_panel_specs.py",
    "test_i18n.py",
    "test_settings.py",
}

# Skip collection of test files if GUI deps are missing.
if not HAS_PYSIDE6:
    collect_ignore = [
        path.name
        for path in Path(__file__).parent.glob("test_*.py")
        if path.name not in QT_FREE
    ]
