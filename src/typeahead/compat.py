"""
String-only autocomplete API.

Autocomplete keeps the call shape of the older string-only interface: it is
trained from raw text and every query returns a plain list of strings. It is
a thin adapter over PredictionEngine; the only ranking rule it adds is the
legacy completion tie-break (equal frequency -> shorter word first).
"""

from __future__ import annotations
from typing import Dict, List, Optional, Union

from .engine import PredictionEngine


class Autocomplete:
    def __init__(self, engine: Optional[PredictionEngine] = None) -> None:
        self.engine = engine or PredictionEngine()

    def train(self, corpus: str) -> None:
        """Replace everything learned so far with the given corpus."""
        self.engine.train(corpus)

    def is_ready(self) -> bool:
        return self.engine.is_trained

    def get_completions(self, text: str) -> List[str]:
        """All known words starting with text: frequency desc, then length asc."""
        rows = self.engine.get_completions(text, max_results=None)
        rows.sort(key=lambda r: (-r.frequency, len(r.word), r.word))
        return [r.word for r in rows]

    def get_next_word(self, sequence: str) -> List[str]:
        return [r.word for r in self.engine.get_next_word(sequence)]

    def get_next_phrase(self, sequence: str) -> List[str]:
        return self.engine.get_next_phrase(sequence)

    def get_stats(self) -> Dict[str, Union[int, float]]:
        """Legacy statistics shape; phrases are not tracked separately, so total_phrases is 0."""
        stats = self.engine.get_stats()
        return {
            "total_words": stats.unique_words,
            "total_phrases": 0,
            "total_ngrams": stats.bigram_count + stats.trigram_count,
            "average_word_frequency": stats.total_words / stats.unique_words if stats.unique_words else 0.0,
        }
