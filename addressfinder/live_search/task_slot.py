"""
Address Finder - Lookup Task Slot

Runs at most one *current* lookup at a time on a background QThread.

Every task gets a generation token when it starts.  Completion is reported
back to the owning thread through a queued signal carrying that token, and
the slot forwards it only if the token still belongs to the current task.
Superseded or cancelled tasks may keep running inside the backend; their
results are dropped when they arrive.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QObject, QThread, Qt, pyqtSignal

from geocoding_client.errors import GeocoderError
from live_search.outcome import LookupOutcome

logger = logging.getLogger("addressfinder.search")

# lookup_fn(query, should_stop) -> iterable of addresses
LookupFn = Callable[[str, Callable[[], bool]], list]


class LookupWorker(QThread):
    """Background thread that performs a single lookup.

    Never raises out of ``run()``: every error becomes a failure outcome.
    """

    completed = pyqtSignal(int, object)  # (generation, LookupOutcome)

    def __init__(self, generation: int, query: str, lookup_fn: LookupFn, parent=None):
        super().__init__(parent)
        self.generation = generation
        self.query = query
        self._lookup_fn = lookup_fn
        self._stop_flag = False

    def request_stop(self):
        """Ask the lookup to give up early.  Best effort only."""
        self._stop_flag = True

    def _should_stop(self) -> bool:
        return self._stop_flag

    def run(self):
        try:
            addresses = self._lookup_fn(self.query, self._should_stop)
            outcome = LookupOutcome.success(self.query, addresses or ())
        except GeocoderError as exc:
            logger.warning("Lookup for %r failed: %s", self.query, exc)
            outcome = LookupOutcome.failure(self.query, exc)
        except Exception as exc:
            logger.error(
                "Lookup for %r raised unexpectedly: %s", self.query, exc, exc_info=True
            )
            outcome = LookupOutcome.failure(self.query, exc)
        self.completed.emit(self.generation, outcome)


class LookupTaskSlot(QObject):
    """Holds the one lookup whose result may still be applied.

    Signals:
        outcome_ready(LookupOutcome): A current task finished.  Always
            delivered on the thread that owns the slot.
        task_started(int, str): A task with (generation, query) started.
        task_cancelled(int): The task with this generation was superseded.
    """

    outcome_ready = pyqtSignal(object)
    task_started = pyqtSignal(int, str)
    task_cancelled = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._next_generation = 0
        self._current: Optional[LookupWorker] = None
        # Every worker that has not finished yet, current or superseded.
        # Holding the reference keeps a running QThread from being destroyed.
        self._workers: set[LookupWorker] = set()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def current_query(self) -> Optional[str]:
        return self._current.query if self._current is not None else None

    def is_in_flight(self) -> bool:
        return self._current is not None

    def running_count(self) -> int:
        """Number of worker threads still alive, including superseded ones."""
        return len(self._workers)

    def start(self, query: str, lookup_fn: LookupFn) -> int:
        """Cancel any current task and start a lookup for ``query``.

        Returns:
            The generation token of the new task.
        """
        self.cancel()

        self._next_generation += 1
        worker = LookupWorker(self._next_generation, query, lookup_fn)
        worker.completed.connect(
            self._on_worker_completed, Qt.ConnectionType.QueuedConnection
        )
        worker.finished.connect(self._on_worker_finished)
        self._workers.add(worker)
        self._current = worker

        logger.debug("Starting lookup %d for %r", worker.generation, query)
        self.task_started.emit(worker.generation, query)
        worker.start()
        return worker.generation

    def cancel(self) -> None:
        """Supersede the current task, if any.  Idempotent.

        The backend call keeps running; only its result is ignored.
        """
        worker = self._current
        if worker is None:
            return
        self._current = None
        worker.request_stop()
        logger.debug("Cancelled lookup %d for %r", worker.generation, worker.query)
        self.task_cancelled.emit(worker.generation)

    def shutdown(self, wait_ms: int = 3000) -> None:
        """Cancel the current task and wait for all worker threads to exit."""
        self.cancel()
        for worker in list(self._workers):
            if worker.isRunning() and not worker.wait(wait_ms):
                logger.warning(
                    "Lookup %d for %r still running after %d ms",
                    worker.generation, worker.query, wait_ms,
                )

    # ------------------------------------------------------------------
    # Worker callbacks (owning thread)
    # ------------------------------------------------------------------

    def _on_worker_completed(self, generation: int, outcome: LookupOutcome) -> None:
        current = self._current
        if current is None or current.generation != generation:
            logger.debug(
                "Discarding stale result %d for %r", generation, outcome.query
            )
            return
        self._current = None
        self.outcome_ready.emit(outcome)

    def _on_worker_finished(self) -> None:
        worker = self.sender()
        if worker in self._workers:
            self._workers.discard(worker)
            worker.deleteLater()
