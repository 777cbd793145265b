"""Selection domain exports."""

from .selection_policy import IndexedCase, Selection, select_cases

__all__ = ["IndexedCase", "Selection", "select_cases"]
