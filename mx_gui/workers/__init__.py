"""QThread workers for async operations."""

from mx_gui.workers.fetch_worker import FetchWorker, FetchWorkerSignals

__all__ = [
    "FetchWorker",
    "FetchWorkerSignals",
]
