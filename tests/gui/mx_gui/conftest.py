"""Pytest configuration for Qt widget tests."""

import os
from pathlib import Path

from tests.helpers.optional_imports import module_available

# Run Qt headless when no display is configured.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Skip collection of widget tests if PySide6 is missing.
if not module_available("PySide6"):
    collect_ignore = [path.name for path in Path(__file__).parent.glob("test_*.py")]
