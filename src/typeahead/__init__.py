"""
Typing-Prediction Engine

This package suggests what a user is about to type, learned from a text
corpus: completions for the word being typed, and likely next words and
phrases, each ranked by observed frequency with a confidence score.

The package is designed with a clean separation of concerns:
- Text cleaning and tokenization (normalize)
- A character trie of word counts (trie.PrefixIndex)
- Bigram/trigram successor tables (ngram.NGramModel)
- Orchestration and ranking (engine.PredictionEngine)
- Result merging and similarity helpers (suggest)
- A string-only legacy API (compat.Autocomplete)

Example Usage:
    from typeahead import PredictionEngine

    engine = PredictionEngine()
    engine.train("I want to eat a pizza. I want to eat a sandwich.")

    for r in engine.get_completions("pi"):
        print(f"{r.word}: {r.frequency} ({r.confidence:.2f})")

    print([r.word for r in engine.get_next_word("I want to eat a")])
"""

# src/typeahead/__init__.py
from .engine import PredictionEngine
from .compat import Autocomplete
from .errors import InvalidCorpus, TypeaheadError, UntrainedState
from .models import CorpusStats, PredictionResult, SimilarWord, SuggestionResult
from .normalize import ENGLISH_STOP_WORDS, clean_text, tokenize
from .ngram import NGramModel
from .suggest import (
    calculate_word_similarity,
    create_from_multiple_sources,
    filter_suggestions,
    find_similar_words,
    merge_suggestions,
    sort_suggestions,
)
from .trie import PrefixIndex

__version__ = "1.0.0"
__all__ = [
    "PredictionEngine",
    "Autocomplete",
    "PrefixIndex",
    "NGramModel",
    "SuggestionResult",
    "PredictionResult",
    "SimilarWord",
    "CorpusStats",
    "TypeaheadError",
    "UntrainedState",
    "InvalidCorpus",
    "ENGLISH_STOP_WORDS",
    "clean_text",
    "tokenize",
    "merge_suggestions",
    "filter_suggestions",
    "sort_suggestions",
    "calculate_word_similarity",
    "find_similar_words",
    "create_from_multiple_sources",
]
