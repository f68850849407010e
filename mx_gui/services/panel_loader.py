"""Fetch coordination between data sources and panel viewmodels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from PySide6.QtCore import QObject, Signal

from mx_common.errors import MXError, error_to_payload
from mx_common.logging import panel_log_context
from mx_gui.workers.fetch_worker import FetchWorker

if TYPE_CHECKING:
    from mx_gui.services.data_source import PanelDataSource
    from mx_gui.viewmodels.table_panel_vm import TablePanelViewModel

logger = logging.getLogger(__name__)


class PanelLoader(QObject):
    """Runs fetches for panels and writes the results back.

    Each request gets a per-panel generation number. Only the result of the
    newest request for a panel is applied; older results are dropped, so
    overlapping searches resolve last-write-wins.
    """

    # Signals
    load_started = Signal(str)  # panel
    load_finished = Signal(str, int)  # panel, row count
    load_failed = Signal(str, str)  # panel, error message

    def __init__(
        self,
        data_source: "PanelDataSource",
        *,
        threaded: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._data_source = data_source
        self._threaded = threaded

        # State
        self._panels: dict[str, "TablePanelViewModel"] = {}
        self._generations: dict[str, int] = {}
        self._workers: dict[tuple[str, int], FetchWorker] = {}

    @property
    def threaded(self) -> bool:
        return self._threaded

    def bind(self, panels: Iterable["TablePanelViewModel"]) -> None:
        """Reload a panel whenever its search form is submitted."""
        for panel in panels:
            self._panels[panel.name] = panel
            form = panel.search_form
            if form is None:
                continue

            def on_search(_parameters: dict, name: str = panel.name) -> None:
                self.load(self._panels[name])

            form.search_requested.connect(on_search)

    def generation(self, panel: str) -> int:
        """Generation of the newest request issued for ``panel``."""
        return self._generations.get(panel, 0)

    def pending(self) -> int:
        """Number of workers that have not reported completion."""
        return len(self._workers)

    def load(self, panel: "TablePanelViewModel") -> int:
        """Fetch rows for ``panel`` using its current search parameters.

        Returns the generation assigned to this request.
        """
        name = panel.name
        self._panels[name] = panel
        generation = self._generations.get(name, 0) + 1
        self._generations[name] = generation

        parameters = panel.search_form.get_parameters() if panel.search_form else {}
        panel.set_loading(True)
        with panel_log_context(name, generation):
            logger.info("Fetching rows for panel %s", name)
            logger.debug("Search parameters: %s", parameters)

        worker = FetchWorker(self._data_source, name, generation, parameters)
        worker.signals.finished.connect(self._on_finished)
        worker.signals.failed.connect(self._on_failed)
        worker.signals.done.connect(self._on_done)
        self._workers[(name, generation)] = worker
        self.load_started.emit(name)

        if self._threaded:
            worker.start()
        else:
            worker.run_inline()
        return generation

    def load_all(self, panels: Iterable["TablePanelViewModel"] | None = None) -> None:
        """Fetch rows for every given (or bound) panel."""
        for panel in list(panels if panels is not None else self._panels.values()):
            self.load(panel)

    def shutdown(self) -> None:
        """Wait for outstanding workers to stop."""
        for worker in list(self._workers.values()):
            worker.wait()
        self._workers.clear()

    def _is_current(self, panel: str, generation: int) -> bool:
        return self._generations.get(panel) == generation

    def _on_finished(self, panel: str, generation: int, rows: list) -> None:
        with panel_log_context(panel, generation):
            if not self._is_current(panel, generation):
                logger.debug("Discarding stale rows for panel %s", panel)
                return
            target = self._panels.get(panel)
            if target is None:
                return
            target.set_rows(rows)
            logger.info("Panel %s loaded %d rows", panel, len(rows))
        self.load_finished.emit(panel, len(rows))

    def _on_failed(self, panel: str, generation: int, error: MXError) -> None:
        payload = error_to_payload(error)
        message = payload["error"]
        with panel_log_context(panel, generation):
            if not self._is_current(panel, generation):
                logger.debug("Ignoring stale failure for panel %s", panel)
                return
            logger.warning(
                "Fetch for panel %s failed (%s): %s %s",
                panel,
                payload["error_type"],
                message,
                payload["error_context"],
            )
        target = self._panels.get(panel)
        if target is not None:
            target.set_loading(False)
        self.load_failed.emit(panel, message)

    def _on_done(self, panel: str, generation: int) -> None:
        worker = self._workers.pop((panel, generation), None)
        if worker is not None:
            worker.wait()
