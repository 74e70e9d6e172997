"""Address Finder - Shared Widget Library."""

from widgets.state_stack import StateStack
from widgets.results_list import ResultsList

__all__ = ["StateStack", "ResultsList"]
