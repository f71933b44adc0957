"""Define the input-validation errors raised by the posterior summarizer.

Every error here signals a caller contract violation. They are raised before
any computation starts and are never retried or recovered internally.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple


class PosteriorSummaryError(ValueError):
    """Base class for summarizer input errors."""


class ShapeMismatchError(PosteriorSummaryError):
    """Raised when the draw matrix and point table disagree in shape.

    Attributes:
        expected: Expected shape description (for example the point count).
        actual: Observed shape of the offending input.
    """

    def __init__(self, expected, actual, message: str | None = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Shape mismatch: expected {expected}, got {actual}."
        super().__init__(message)


class DuplicateKeyError(PosteriorSummaryError):
    """Raised when the point id column contains repeated values."""

    def __init__(self, column: str, duplicates: Iterable):
        self.column = column
        self.duplicates: Tuple = tuple(duplicates)
        shown = list(self.duplicates[:5])
        super().__init__(
            f"Point id column '{column}' must be unique; "
            f"duplicated ids: {shown}."
        )


class InvalidProbabilityError(PosteriorSummaryError):
    """Raised when interval probabilities are outside [0, 1] or unordered."""

    def __init__(self, values: Sequence[float], reason: str):
        self.values = tuple(values)
        super().__init__(f"Invalid interval probabilities {list(self.values)}: {reason}")


class MissingDrawError(PosteriorSummaryError):
    """Raised when the draw matrix holds NaN or infinite cells."""

    def __init__(self, n_missing: int, columns: Sequence[int]):
        self.n_missing = int(n_missing)
        self.columns = tuple(int(c) for c in columns)
        super().__init__(
            f"Draw matrix contains {self.n_missing} non-finite value(s); "
            f"affected column positions: {list(self.columns[:5])}."
        )
