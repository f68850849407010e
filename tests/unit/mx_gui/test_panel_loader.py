"""Unit tests for PanelLoader and FetchWorker (inline fetches)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mx_common.errors import DataSourceError


pytestmark = pytest.mark.unit_gui


class TestFetchWorker:
    def test_run_inline_emits_finished_then_done(self) -> None:
        from mx_gui.workers.fetch_worker import FetchWorker

        source = MagicMock()
        source.fetch.return_value = [{"id": "a"}]
        worker = FetchWorker(source, "flow", 3, {"name": "x"})
        events: list[tuple] = []
        worker.signals.finished.connect(lambda *args: events.append(("finished", *args)))
        worker.signals.done.connect(lambda *args: events.append(("done", *args)))

        worker.run_inline()

        source.fetch.assert_called_once_with("flow", {"name": "x"})
        assert events == [("finished", "flow", 3, [{"id": "a"}]), ("done", "flow", 3)]
        assert worker.is_running() is False

    def test_run_inline_reports_failure(self) -> None:
        from mx_gui.workers.fetch_worker import FetchWorker

        source = MagicMock()
        source.fetch.side_effect = DataSourceError("backend down")
        worker = FetchWorker(source, "batch", 1, {})
        failed = MagicMock()
        finished = MagicMock()
        worker.signals.failed.connect(failed)
        worker.signals.finished.connect(finished)

        worker.run_inline()

        failed.assert_called_once()
        panel, generation, error = failed.call_args.args
        assert (panel, generation) == ("batch", 1)
        assert isinstance(error, DataSourceError)
        assert str(error) == "backend down"
        finished.assert_not_called()

    def test_unexpected_error_is_wrapped(self) -> None:
        from mx_gui.workers.fetch_worker import FetchWorker

        cause = KeyError("token")
        source = MagicMock()
        source.fetch.side_effect = cause
        worker = FetchWorker(source, "itsm", 2, {"scene": "1"})
        failed = MagicMock()
        worker.signals.failed.connect(failed)

        worker.run_inline()

        error = failed.call_args.args[2]
        assert isinstance(error, DataSourceError)
        assert error.__cause__ is cause
        assert error.context == {"panel": "itsm", "parameters": {"scene": "1"}}
        assert str(error).startswith("Fetch failed:")


class TestPanelLoader:
    """Tests for PanelLoader with threaded=False."""

    @pytest.fixture
    def registry(self):
        from mx_gui.viewmodels.registry_vm import SelectionTableRegistry

        return SelectionTableRegistry()

    @pytest.fixture
    def source(self, flow_rows: list[dict], itsm_rows: list[dict]):
        from mx_gui.services.data_source import StaticPanelDataSource

        return StaticPanelDataSource({"flow": flow_rows, "itsm": itsm_rows, "role": [{"name": "ops"}]})

    @pytest.fixture
    def loader(self, source, registry):
        from mx_gui.services.panel_loader import PanelLoader

        loader = PanelLoader(source, threaded=False)
        loader.bind(registry)
        return loader

    def test_load_writes_rows(self, loader, registry, flow_rows: list[dict]) -> None:
        finished = MagicMock()
        loader.load_finished.connect(finished)
        flow = registry.panel("flow")

        generation = loader.load(flow)

        assert generation == 1
        assert flow.rows == flow_rows
        assert flow.loading is False
        assert loader.pending() == 0
        finished.assert_called_once_with("flow", 2)

    def test_load_sets_loading_while_fetching(self, registry) -> None:
        from mx_gui.services.panel_loader import PanelLoader

        flow = registry.panel("flow")
        seen: list[bool] = []

        def fetch(_panel, _params):
            seen.append(flow.loading)
            return []

        source = MagicMock()
        source.fetch.side_effect = fetch
        loader = PanelLoader(source, threaded=False)

        loader.load(flow)

        assert seen == [True]
        assert flow.loading is False

    def test_search_submit_triggers_filtered_load(self, loader, registry) -> None:
        flow = registry.panel("flow")
        flow.search_form.set_field_value("name", "rollback")

        flow.search_form.submit()

        assert [row["id"] for row in flow.rows] == ["pdef_zz99"]
        assert loader.generation("flow") == 1

    def test_itsm_scene_search(self, loader, registry) -> None:
        itsm = registry.panel("itsm")
        itsm.search_form.set_field_value("scene", "1")

        itsm.search_form.submit()

        assert [row["id"] for row in itsm.rows] == ["tpl-1"]

    def test_load_all(self, loader, registry) -> None:
        loader.load_all()

        assert registry.panel("role").rows == [{"name": "ops"}]
        assert len(registry.panel("itsm").rows) == 2
        assert registry.panel("batch").rows == []
        assert all(loader.generation(name) == 1 for name in registry.names)

    def test_failure_keeps_rows_and_clears_loading(self, registry) -> None:
        from mx_gui.services.panel_loader import PanelLoader

        flow = registry.panel("flow")
        flow.set_rows([{"id": "keep"}])
        source = MagicMock()
        source.fetch.side_effect = DataSourceError("timeout")
        loader = PanelLoader(source, threaded=False)
        failed = MagicMock()
        loader.load_failed.connect(failed)

        loader.load(flow)

        assert flow.rows == [{"id": "keep"}]
        assert flow.loading is False
        failed.assert_called_once_with("flow", "timeout")

    def test_unexpected_failure_reaches_status_message(self, registry) -> None:
        from mx_gui.services.panel_loader import PanelLoader

        flow = registry.panel("flow")
        source = MagicMock()
        source.fetch.side_effect = RuntimeError("socket closed")
        loader = PanelLoader(source, threaded=False)
        failed = MagicMock()
        loader.load_failed.connect(failed)

        loader.load(flow)

        failed.assert_called_once_with("flow", "Fetch failed: socket closed")
        assert flow.loading is False

    def test_stale_results_are_discarded(self, loader, registry) -> None:
        """Only the newest request for a panel is applied."""
        flow = registry.panel("flow")
        loader.load(flow)
        loader.load(flow)
        assert loader.generation("flow") == 2

        loader._on_finished("flow", 1, [{"id": "stale"}])
        assert all(row["id"] != "stale" for row in flow.rows)

        loader._on_finished("flow", 2, [{"id": "fresh"}])
        assert flow.rows == [{"id": "fresh"}]

    def test_stale_failure_is_ignored(self, loader, registry) -> None:
        flow = registry.panel("flow")
        loader.load(flow)
        loader.load(flow)
        failed = MagicMock()
        loader.load_failed.connect(failed)
        flow.set_loading(True)

        loader._on_failed("flow", 1, DataSourceError("old error"))

        failed.assert_not_called()
        assert flow.loading is True

    def test_generations_are_per_panel(self, loader, registry) -> None:
        loader.load(registry.panel("flow"))
        loader.load(registry.panel("flow"))
        loader.load(registry.panel("batch"))

        assert loader.generation("flow") == 2
        assert loader.generation("batch") == 1
        assert loader.generation("role") == 0

    def test_shutdown_without_workers(self, loader) -> None:
        loader.shutdown()

        assert loader.pending() == 0
