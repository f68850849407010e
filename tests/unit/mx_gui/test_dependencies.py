import pytest

from tests.helpers.optional_imports import module_available


pytestmark = pytest.mark.unit_gui


def test_mx_gui_dependency_availability() -> None:
    if not module_available("PySide6"):
        pytest.skip("mx_gui dependencies missing")
    assert module_available("mx_gui.viewmodels") is True
