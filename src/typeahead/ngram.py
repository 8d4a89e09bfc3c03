"""
N-gram tables for next-word prediction.

Two tables map a context to a Counter of observed successors:

  bigrams  : "word"       -> Counter(next_word -> count)
  trigrams : "word1 word2" -> Counter(next_word -> count)

A context key is only created when a transition is recorded, so every key
has at least one successor with a positive count.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, List, Sequence, Tuple, Union

from .config import TRIGRAM_WEIGHT, BIGRAM_WEIGHT


class NGramModel:
    def __init__(self, *, trigram_weight: int = TRIGRAM_WEIGHT, bigram_weight: int = BIGRAM_WEIGHT) -> None:
        self.trigram_weight = trigram_weight
        self.bigram_weight = bigram_weight
        self._bigrams: Dict[str, Counter] = {}
        self._trigrams: Dict[str, Counter] = {}

    # ---- Build ----
    def update(self, tokens: Sequence[str]) -> None:
        """
        Record every bigram and trigram transition of one token sequence.

        The sequence is one sentence: nothing links it to sequences passed in
        other calls. Fewer than two tokens records nothing.
        """
        n = len(tokens)
        for i in range(n - 1):
            self._record(self._bigrams, tokens[i], tokens[i + 1])
            if i < n - 2:
                self._record(self._trigrams, f"{tokens[i]} {tokens[i + 1]}", tokens[i + 2])

    @staticmethod
    def _record(table: Dict[str, Counter], context: str, nxt: str) -> None:
        counts = table.get(context)
        if counts is None:
            counts = table[context] = Counter()
        counts[nxt] += 1

    def clear(self) -> None:
        self._bigrams.clear()
        self._trigrams.clear()

    # ---- Query ----
    def predict(
        self,
        context: Union[str, Sequence[str]],
        *,
        use_trigrams: bool = True,
        use_bigrams: bool = True,
    ) -> List[Tuple[str, int]]:
        """
        Weighted successor scores for the trailing one or two context tokens.

        Trigram counts for the last two tokens are multiplied by
        trigram_weight, bigram counts for the last token by bigram_weight, and
        a word supported by both gets the sum. No matching context -> [].

        Returns (word, score) sorted by score descending, then word.

        Example:
            >>> m = NGramModel()
            >>> m.update(["eat", "a", "pizza"]); m.update(["eat", "a", "pie"]); m.update(["a", "pie"])
            >>> m.predict(["eat", "a"])
            [('pie', 4), ('pizza', 3)]
        """
        toks = context.split() if isinstance(context, str) else list(context)
        if not toks:
            return []

        scores: Counter = Counter()
        if use_trigrams and len(toks) >= 2:
            for word, count in self._trigrams.get(f"{toks[-2]} {toks[-1]}", {}).items():
                scores[word] += count * self.trigram_weight
        if use_bigrams:
            for word, count in self._bigrams.get(toks[-1], {}).items():
                scores[word] += count * self.bigram_weight

        return sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))

    def next_words(self, context_key: str) -> Dict[str, int]:
        """Raw successor counts for one context key ("word" or "word1 word2")."""
        table = self._trigrams if " " in context_key else self._bigrams
        return dict(table.get(context_key, {}))

    # ---- Introspection ----
    @property
    def bigram_count(self) -> int:
        return len(self._bigrams)

    @property
    def trigram_count(self) -> int:
        return len(self._trigrams)
