"""Background refresh of the score table on a fixed interval."""

import threading
from typing import Callable

from .database import ScoreStore, ScoreTable, fetch_scores
from .utils import log_error, log_verbose

DEFAULT_INTERVAL = 120.0


class RefreshTask:
    """Periodically rebuild a ScoreStore's table on a daemon thread.

    The first refresh runs as soon as the task starts. The task is owned
    by whoever starts it and must be stopped by them (or used as a context
    manager).

    Example:
        with RefreshTask(store, interval=60):
            ...  # store is refreshed every minute
    """

    def __init__(
        self,
        store: ScoreStore,
        fetch: Callable[[], ScoreTable] = fetch_scores,
        interval: float = DEFAULT_INTERVAL,
    ):
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        self.store = store
        self.fetch = fetch
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def refresh_now(self) -> None:
        """Refresh once on the calling thread."""
        table = self.store.refresh(self.fetch)
        log_verbose(f"Score table refreshed: {len(table)} directories")

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.refresh_now()
            except Exception as e:
                # Keep the previous table and try again next round
                log_error(f"Score table refresh failed: {e}")
            self._stop.wait(self.interval)

    def start(self) -> "RefreshTask":
        if self.running:
            return self
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="zpredict-refresh", daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def __enter__(self) -> "RefreshTask":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()
