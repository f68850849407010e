"""Unit tests for SearchFormViewModel."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mx_gui.schema.search import SearchField, SearchFieldKind, SearchOption


pytestmark = pytest.mark.unit_gui


class TestSearchFormViewModel:
    """Tests for SearchFormViewModel."""

    @pytest.fixture
    def fields(self) -> list[SearchField]:
        return [
            SearchField(key="name", placeholder="Name"),
            SearchField(
                key="scene",
                placeholder="Scene",
                kind=SearchFieldKind.SELECT,
                options=(SearchOption("1", "Release"),),
            ),
        ]

    def test_initial_state(self, fields: list[SearchField]) -> None:
        """Every parameter starts as an empty string."""
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)

        assert vm.get_parameters() == {"name": "", "scene": ""}
        assert vm.is_blank is True
        assert vm.fields == tuple(fields)

    def test_set_field_value_emits_snapshot(self, fields: list[SearchField]) -> None:
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)
        handler = MagicMock()
        vm.parameters_changed.connect(handler)

        vm.set_field_value("name", "deploy")

        assert vm.value("name") == "deploy"
        assert vm.is_blank is False
        handler.assert_called_once_with({"name": "deploy", "scene": ""})

    def test_unknown_select_value_is_stored(self, fields: list[SearchField]) -> None:
        """Values outside the option list are kept as given."""
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)
        vm.set_field_value("scene", "99")

        assert vm.get_parameters()["scene"] == "99"

    def test_get_parameters_returns_copy(self, fields: list[SearchField]) -> None:
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)
        params = vm.get_parameters()
        params["name"] = "mutated"

        assert vm.value("name") == ""

    def test_reset(self, fields: list[SearchField]) -> None:
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)
        vm.set_field_value("name", "deploy")
        vm.set_field_value("scene", "1")
        vm.reset()

        assert vm.get_parameters() == {"name": "", "scene": ""}

    def test_submit_emits_search_requested(self, fields: list[SearchField]) -> None:
        from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

        vm = SearchFormViewModel(fields)
        handler = MagicMock()
        vm.search_requested.connect(handler)
        vm.set_field_value("name", "x")

        vm.submit()

        handler.assert_called_once_with({"name": "x", "scene": ""})
