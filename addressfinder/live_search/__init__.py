"""Address Finder - Debounced live search core."""

from live_search.controller import (
    DEBOUNCE_DELAY_MS,
    MAX_RESULTS,
    MIN_REQUEST_LENGTH,
    SearchController,
)
from live_search.debounce import DebounceScheduler
from live_search.outcome import LookupOutcome, PresentationState, SearchState
from live_search.task_slot import LookupTaskSlot

__all__ = [
    "SearchController",
    "DebounceScheduler",
    "LookupTaskSlot",
    "LookupOutcome",
    "PresentationState",
    "SearchState",
    "MIN_REQUEST_LENGTH",
    "DEBOUNCE_DELAY_MS",
    "MAX_RESULTS",
]
