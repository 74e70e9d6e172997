"""
Address Finder - Live Search Value Types

Plain values passed between the scheduler, the task slot, the controller
and the widgets.  Nothing here touches Qt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PresentationState(Enum):
    """Which page the results area shows."""
    EMPTY = "empty"
    LOADING = "loading"
    CONTENT = "content"


class SearchState(Enum):
    """Controller lifecycle state."""
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    QUERYING = "querying"


@dataclass(frozen=True)
class LookupOutcome:
    """Result of one completed lookup: either ``addresses`` or ``error``."""
    query: str
    addresses: Optional[tuple] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, query: str, addresses) -> "LookupOutcome":
        return cls(query=query, addresses=tuple(addresses))

    @classmethod
    def failure(cls, query: str, error: BaseException) -> "LookupOutcome":
        return cls(query=query, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_query(text: str | None) -> str:
    """Return the query for raw input text (surrounding whitespace removed)."""
    return (text or "").strip()
