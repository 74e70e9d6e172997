"""
Address Finder - Debounce Scheduler

Single-slot trailing debounce: every ``submit()`` restarts one timer, and
only the query from the last submit is delivered once input has been
stable for the full delay.
"""

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, Qt


class DebounceScheduler(QObject):
    """Delays a query until input has settled.

    Args:
        delay_ms: Quiet period in milliseconds before ``on_fire`` runs.
        on_fire: Called with the pending query on the scheduler's thread.
    """

    def __init__(self, delay_ms: int, on_fire: Callable[[str], None], parent=None):
        super().__init__(parent)
        self._on_fire = on_fire
        self._pending: Optional[str] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._fire)

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    @property
    def pending_query(self) -> Optional[str]:
        """The query waiting for the timer, or None."""
        return self._pending

    def is_pending(self) -> bool:
        return self._pending is not None

    def submit(self, query: str) -> None:
        """Replace any pending query with ``query`` and restart the delay."""
        self._pending = query
        # start() on an active timer stops and restarts it
        self._timer.start()

    def cancel_all(self) -> None:
        """Drop the pending query, if any."""
        self._timer.stop()
        self._pending = None

    def _fire(self) -> None:
        query = self._pending
        self._pending = None
        if query is not None:
            self._on_fire(query)
