"""
Address Finder - Search Controller

Turns raw keystrokes into geocoding lookups and lookup outcomes into
presentation updates.

    text edit -> on_input_changed -> DebounceScheduler (coalesce)
              -> run_query -> LookupTaskSlot (one current task)
              -> _on_outcome -> presentation_changed / results_changed

All state lives on the thread that created the controller (the GUI
thread).  Lookups run on worker threads and come back through queued
signals, so no locking is needed.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from live_search.debounce import DebounceScheduler
from live_search.outcome import (
    LookupOutcome,
    PresentationState,
    SearchState,
    normalize_query,
)
from live_search.task_slot import LookupFn, LookupTaskSlot

logger = logging.getLogger("addressfinder.search")

MIN_REQUEST_LENGTH = 3
DEBOUNCE_DELAY_MS = 1000
MAX_RESULTS = 20


class SearchController(QObject):
    """Debounced, stale-safe search controller.

    Signals:
        presentation_changed(PresentationState): The derived presentation
            state changed.  Never emitted twice in a row with the same value.
        results_changed(list): New address list to render.  Empty list
            when results are cleared.
        transient_error(str): A lookup failed; show a short notification.

    Args:
        lookup_fn: ``lookup_fn(query, should_stop)`` returning addresses or
            raising a ``GeocoderError``.  Runs on a worker thread.
        debounce_ms: Quiet period before a lookup starts.
    """

    presentation_changed = pyqtSignal(object)
    results_changed = pyqtSignal(list)
    transient_error = pyqtSignal(str)

    def __init__(
        self,
        lookup_fn: LookupFn,
        debounce_ms: int = DEBOUNCE_DELAY_MS,
        parent=None,
    ):
        super().__init__(parent)
        self._lookup_fn = lookup_fn
        self._disposed = False
        self._results: Optional[list] = None
        self._shown_presentation = PresentationState.EMPTY

        self._scheduler = DebounceScheduler(debounce_ms, self.run_query, self)
        self._tasks = LookupTaskSlot(self)
        self._tasks.outcome_ready.connect(self._on_outcome)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def results(self) -> Optional[list]:
        """The active result set: None, [] or a list of addresses."""
        return None if self._results is None else list(self._results)

    @property
    def state(self) -> SearchState:
        if self._tasks.is_in_flight():
            return SearchState.QUERYING
        if self._scheduler.is_pending():
            return SearchState.DEBOUNCING
        return SearchState.IDLE

    @property
    def presentation(self) -> PresentationState:
        """Presentation derived from the result set and pending work.

        While debouncing, existing content stays visible; with nothing
        shown yet the loading page appears right away.
        """
        state = self.state
        if state is SearchState.QUERYING:
            return PresentationState.LOADING
        if self._results:
            return PresentationState.CONTENT
        if state is SearchState.DEBOUNCING:
            return PresentationState.LOADING
        return PresentationState.EMPTY

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def on_input_changed(self, text: str) -> None:
        """Handle every edit of the search field."""
        if self._disposed:
            logger.debug("Ignoring input after dispose")
            return

        query = normalize_query(text)
        if len(query) < MIN_REQUEST_LENGTH:
            self._scheduler.cancel_all()
            self._tasks.cancel()
            self._clear_results()
        else:
            self._scheduler.submit(query)
        self._publish_presentation()

    def run_query(self, query: str) -> None:
        """Start a lookup for ``query``.  Called when the debounce timer fires."""
        if self._disposed:
            logger.debug("Ignoring timer for %r after dispose", query)
            return

        query = normalize_query(query)
        if len(query) < MIN_REQUEST_LENGTH:
            self._tasks.cancel()
            self._clear_results()
        else:
            self._tasks.start(query, self._lookup_fn)
        self._publish_presentation()

    def dispose(self) -> None:
        """Stop all pending work.  No signal is emitted afterwards."""
        if self._disposed:
            return
        self._disposed = True
        self._scheduler.cancel_all()
        self._tasks.cancel()
        logger.debug("Search controller disposed")

    def shutdown(self, wait_ms: int = 3000) -> None:
        """Dispose and wait for lookup threads still running in the backend."""
        self.dispose()
        self._tasks.shutdown(wait_ms)

    # ------------------------------------------------------------------
    # Outcome handling
    # ------------------------------------------------------------------

    def _on_outcome(self, outcome: LookupOutcome) -> None:
        if self._disposed:
            logger.debug("Discarding result for %r after dispose", outcome.query)
            return

        if outcome.ok:
            self._results = list(outcome.addresses)
            logger.info("Lookup for %r returned %d address(es)",
                        outcome.query, len(self._results))
            self.results_changed.emit(list(self._results))
        else:
            self._results = None
            self.transient_error.emit(str(outcome.error))
            self.results_changed.emit([])
        self._publish_presentation()

    def _clear_results(self) -> None:
        had_content = bool(self._results)
        self._results = None
        if had_content:
            self.results_changed.emit([])

    def _publish_presentation(self) -> None:
        presentation = self.presentation
        if presentation is not self._shown_presentation:
            self._shown_presentation = presentation
            self.presentation_changed.emit(presentation)
