# src/typeahead/models.py
"""
Data models for the prediction engine.

This module defines small, focused data containers:

- SuggestionResult: one ranked word completion.
- PredictionResult: one ranked next-word prediction plus the context used.
- SimilarWord: a candidate word annotated with its similarity to a target.
- CorpusStats: a statistics snapshot of the trained corpus.

These classes do not contain business logic; they only structure the data so
that training, ranking, and the outer surfaces (CLI, HTTP) stay simple.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class SuggestionResult:
    """
    A word completion returned by PredictionEngine.get_completions().

    Attributes
    ----------
    word : str
        The complete word, as stored in the index (lowercased unless the
        corpus was processed case-sensitively).
    frequency : int
        Number of times the word occurred in the trained corpus. Results
        produced by merge_suggestions(weight_by_source=True) carry the
        weighted (float) sum instead.
    confidence : float
        frequency / total trained tokens, capped at 1.0. Relative certainty,
        not a probability distribution.
    """
    word: str
    frequency: int
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PredictionResult:
    """
    A next-word prediction returned by PredictionEngine.get_next_word().

    Attributes
    ----------
    word : str
        The predicted next word.
    frequency : int
        Weighted n-gram score: trigram counts times the trigram weight plus
        bigram counts times the bigram weight.
    confidence : float
        frequency / total trained tokens, capped at 1.0.
    context : str
        The trailing one- or two-token window the prediction was made from.
    """
    word: str
    frequency: int
    confidence: float
    context: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SimilarWord:
    word: str
    similarity: float
    frequency: int = 0
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CorpusStats:
    """
    Snapshot of the trained corpus. Derived on demand, never persisted.

    Attributes
    ----------
    total_words : int
        Total tokens processed.
    unique_words : int
        Distinct words in the prefix index.
    bigram_count : int
        Distinct single-word contexts with at least one observed successor.
    trigram_count : int
        Distinct two-word contexts with at least one observed successor.
    average_word_length : float
        Mean token length in characters (0.0 for an empty corpus).
    """
    total_words: int
    unique_words: int
    bigram_count: int
    trigram_count: int
    average_word_length: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
