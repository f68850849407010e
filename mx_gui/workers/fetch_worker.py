"""QThread worker for fetching panel rows asynchronously."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from PySide6.QtCore import QObject, QThread, Signal

from mx_common.errors import DataSourceError, MXError, wrap_error

if TYPE_CHECKING:
    from mx_gui.services.data_source import PanelDataSource

logger = logging.getLogger(__name__)


class FetchWorkerSignals(QObject):
    """Signals emitted by FetchWorker.

    Every signal carries the panel name and the request generation so the
    receiver can discard results that were superseded.
    """

    finished = Signal(str, int, list)  # panel, generation, rows
    failed = Signal(str, int, object)  # panel, generation, MXError
    done = Signal(str, int)  # panel, generation; thread has stopped


class FetchWorker(QObject):
    """Worker that runs one panel fetch in a separate thread."""

    def __init__(
        self,
        data_source: "PanelDataSource",
        panel: str,
        generation: int,
        parameters: Mapping[str, str],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._data_source = data_source
        self._panel = panel
        self._generation = generation
        self._parameters = dict(parameters)
        self._thread: QThread | None = None

        self.signals = FetchWorkerSignals()

    @property
    def panel(self) -> str:
        return self._panel

    @property
    def generation(self) -> int:
        return self._generation

    def start(self) -> None:
        """Start the worker in a new thread."""
        if self._thread is not None:
            return
        self._thread = QThread()
        self.moveToThread(self._thread)
        self._thread.started.connect(self._run)
        self._thread.finished.connect(self._emit_done)
        self._thread.start()

    def run_inline(self) -> None:
        """Run the fetch on the calling thread."""
        self._execute()
        self._emit_done()

    def _run(self) -> None:
        """Execute the fetch in the worker thread."""
        try:
            self._execute()
        finally:
            if self._thread is not None:
                self._thread.quit()

    def _execute(self) -> None:
        try:
            rows = self._data_source.fetch(self._panel, self._parameters)
        except MXError as exc:
            self.signals.failed.emit(self._panel, self._generation, exc)
            return
        except Exception as exc:
            logger.warning("Unexpected error fetching panel %s", self._panel, exc_info=True)
            error = wrap_error(
                DataSourceError,
                f"Fetch failed: {exc}",
                context={"panel": self._panel, "parameters": self._parameters},
                cause=exc,
            )
            self.signals.failed.emit(self._panel, self._generation, error)
            return
        self.signals.finished.emit(self._panel, self._generation, list(rows))

    def _emit_done(self) -> None:
        self.signals.done.emit(self._panel, self._generation)

    def wait(self) -> None:
        """Block until the worker thread has fully stopped."""
        if self._thread is not None:
            self._thread.wait()
            self._thread.deleteLater()
            self._thread = None

    def is_running(self) -> bool:
        """Check if the worker is currently running."""
        return self._thread is not None and self._thread.isRunning()
