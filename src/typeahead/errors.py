"""Exceptions raised by the prediction engine."""
from __future__ import annotations


class TypeaheadError(Exception):
    """Base class for engine errors."""


class UntrainedState(TypeaheadError, RuntimeError):
    """A query was made before the engine was trained."""

    def __init__(self, message: str = "Engine not trained. Call train() or process_corpus() first.") -> None:
        super().__init__(message)


class InvalidCorpus(TypeaheadError, ValueError):
    """Training was called with empty or non-text input."""
