# typeahead/engine.py
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

from . import config as CFG
from .errors import InvalidCorpus, UntrainedState
from .models import CorpusStats, PredictionResult, SuggestionResult
from .ngram import NGramModel
from .normalize import query_tokens, sentence_tokens
from .trie import PrefixIndex

log = logging.getLogger(__name__)


class _Tables(NamedTuple):
    """Everything a query reads. Replaced as a whole, never field by field."""
    index: PrefixIndex
    ngrams: NGramModel
    total_tokens: int


class PredictionEngine:
    """
    Orchestration layer that glues together:
      - a PrefixIndex (word -> count trie) for completions,
      - an NGramModel (bigram/trigram tables) for next-word prediction.

    Public API (used by the CLI, Flask and the compatibility facade):
      * train(corpus):            rebuild everything from one corpus string
      * process_corpus(text):     fold another corpus into the current tables
      * get_completions(prefix):  ranked words starting with prefix
      * get_next_word(context):   ranked successors of the trailing context
      * get_next_phrase(context): ranked 2-4 word continuations
      * get_stats(), most_common_words(n)

    Every query raises UntrainedState until train() or process_corpus() has
    run. The engine is synchronous and does no I/O; callers serialize
    training against queries.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        trigram_weight: int = CFG.TRIGRAM_WEIGHT,
        bigram_weight: int = CFG.BIGRAM_WEIGHT,
        phrase_decay: Optional[Mapping[int, float]] = None,
        phrase_branches: int = CFG.PHRASE_BRANCHES,
        min_word_length: int = CFG.MIN_WORD_LENGTH,
        max_word_length: int = CFG.MAX_WORD_LENGTH,
    ) -> None:
        self.trigram_weight = trigram_weight
        self.bigram_weight = bigram_weight
        self.phrase_decay: Dict[int, float] = dict(CFG.PHRASE_DECAY if phrase_decay is None else phrase_decay)
        self.phrase_branches = phrase_branches
        self.min_word_length = min_word_length
        self.max_word_length = max_word_length

        self._state = self._empty_tables()
        self._trained = False

    def _empty_tables(self) -> _Tables:
        return _Tables(PrefixIndex(), self._new_model(), 0)

    def _new_model(self) -> NGramModel:
        return NGramModel(trigram_weight=self.trigram_weight, bigram_weight=self.bigram_weight)

    @property
    def is_trained(self) -> bool:
        return self._trained

    # /* ~~~ Replace all state with tables built from one corpus ~~~ */
    def train(self, corpus_text: str) -> None:
        if not isinstance(corpus_text, str) or not corpus_text.strip():
            raise InvalidCorpus("Corpus must be a non-empty string")

        # build off to the side; prior state survives until the pass completes
        index = PrefixIndex()
        model = self._new_model()
        tokens, sentences = self._ingest(
            corpus_text, index, model,
            case_sensitive=False,
            min_length=self.min_word_length,
            max_length=self.max_word_length,
        )

        self._state = _Tables(index, model, tokens)
        self._trained = True
        log.info("Engine train() complete: sentences=%d tokens=%d unique=%d",
                 sentences, tokens, len(index))

    # /* ~~~ Add another corpus on top of the current tables ~~~ */
    def process_corpus(
        self,
        text: str,
        *,
        case_sensitive: bool = False,
        min_word_length: Optional[int] = None,
        max_word_length: Optional[int] = None,
    ) -> None:
        if not isinstance(text, str):
            raise InvalidCorpus(f"Corpus must be a string, got {type(text).__name__}")
        state = self._state
        tokens, sentences = self._ingest(
            text, state.index, state.ngrams,
            case_sensitive=case_sensitive,
            min_length=self.min_word_length if min_word_length is None else min_word_length,
            max_length=self.max_word_length if max_word_length is None else max_word_length,
        )
        self._state = state._replace(total_tokens=state.total_tokens + tokens)
        self._trained = True
        log.info("Engine process_corpus() added: sentences=%d tokens=%d (total=%d)",
                 sentences, tokens, self._state.total_tokens)

    def clear(self) -> None:
        """Drop all trained data and return to the untrained state."""
        self._state = self._empty_tables()
        self._trained = False

    @staticmethod
    def _ingest(
        text: str,
        index: PrefixIndex,
        model: NGramModel,
        *,
        case_sensitive: bool,
        min_length: int,
        max_length: int,
    ) -> Tuple[int, int]:
        """Feed each sentence separately to index and model. Returns (tokens, sentences)."""
        n_tokens = 0
        sentences = sentence_tokens(text, case_sensitive=case_sensitive,
                                    min_length=min_length, max_length=max_length)
        for toks in sentences:
            for tok in toks:
                index.insert(tok)
            model.update(toks)
            n_tokens += len(toks)
        return n_tokens, len(sentences)

    # ------------- query -------------

    # /* ~~~ Words starting with the in-progress prefix ~~~ */
    def get_completions(
        self,
        prefix: str,
        *,
        max_results: Optional[int] = CFG.MAX_COMPLETIONS,
        min_frequency: int = 0,
        case_sensitive: bool = False,
    ) -> List[SuggestionResult]:
        state = self._require_trained()
        if not isinstance(prefix, str) or (max_results is not None and max_results <= 0):
            return []
        key = prefix.strip()
        if not key:
            return []
        if not case_sensitive:
            key = key.lower()

        rows = [
            SuggestionResult(word=w, frequency=f, confidence=_confidence(f, state.total_tokens))
            for w, f in state.index.find_with_prefix(key)
            if f >= min_frequency
        ]
        rows.sort(key=lambda r: (-r.frequency, r.word))
        log.debug("completions for %r: %d candidates", key, len(rows))
        return rows[:max_results]

    # /* ~~~ Likely successors of the trailing one or two context words ~~~ */
    def get_next_word(
        self,
        context: str,
        *,
        max_results: Optional[int] = CFG.MAX_PREDICTIONS,
        min_frequency: int = 0,
        use_trigrams: bool = True,
        use_bigrams: bool = True,
    ) -> List[PredictionResult]:
        state = self._require_trained()
        if not isinstance(context, str) or (max_results is not None and max_results <= 0):
            return []
        toks = query_tokens(context)
        if not toks:
            return []

        window = " ".join(toks[-2:] if use_trigrams else toks[-1:])
        rows = [
            PredictionResult(word=w, frequency=score, confidence=_confidence(score, state.total_tokens), context=window)
            for w, score in state.ngrams.predict(toks, use_trigrams=use_trigrams, use_bigrams=use_bigrams)
            if score >= min_frequency
        ]
        log.debug("next words for %r: %d candidates", window, len(rows))
        return rows[:max_results]

    # /* ~~~ 2-4 word continuations chained from the top next words ~~~ */
    def get_next_phrase(self, context: str, *, max_results: Optional[int] = None) -> List[str]:
        """
        Build phrases by chaining next-word lookups from each top candidate.

        Each candidate of get_next_word(context) (at most phrase_branches) is
        extended one word at a time, phrase_branches successors per step. A
        phrase of n words scores the first word's frequency times
        phrase_decay[n]; identical phrases reached through several paths sum
        their scores. Sorted by score descending, then text.
        """
        state = self._require_trained()
        if not isinstance(context, str):
            return []

        scores: Dict[str, float] = {}
        for first in self.get_next_word(context, max_results=self.phrase_branches):
            for length in sorted(self.phrase_decay):
                if length < 2:
                    continue
                weight = first.frequency * self.phrase_decay[length]
                for phrase in self._extend(state.ngrams, first.word, length - 1):
                    scores[phrase] = scores.get(phrase, 0.0) + weight

        ranked = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
        if max_results is not None:
            ranked = ranked[:max(0, max_results)]
        return [phrase for phrase, _ in ranked]

    def _extend(self, ngrams: NGramModel, word: str, remaining: int) -> List[str]:
        if remaining == 0:
            return [word]
        out: List[str] = []
        for nxt, _ in ngrams.predict([word])[:self.phrase_branches]:
            for tail in self._extend(ngrams, nxt, remaining - 1):
                out.append(f"{word} {tail}")
        return out

    # ------------- statistics -------------

    def get_stats(self) -> CorpusStats:
        state = self._require_trained()
        total = 0
        chars = 0
        for word, freq in state.index.items():
            total += freq
            chars += len(word) * freq
        return CorpusStats(
            total_words=total,
            unique_words=len(state.index),
            bigram_count=state.ngrams.bigram_count,
            trigram_count=state.ngrams.trigram_count,
            average_word_length=chars / total if total else 0.0,
        )

    def most_common_words(self, n: int = 10) -> List[SuggestionResult]:
        state = self._require_trained()
        if n <= 0:
            return []
        ranked = sorted(state.index.items(), key=lambda kv: (-kv[1], kv[0]))[:n]
        return [SuggestionResult(word=w, frequency=f, confidence=_confidence(f, state.total_tokens)) for w, f in ranked]

    def has_word(self, word: str) -> bool:
        index = self._require_trained().index
        if not isinstance(word, str):
            return False
        return index.contains(word.lower()) or index.contains(word)

    def word_frequency(self, word: str) -> int:
        index = self._require_trained().index
        if not isinstance(word, str):
            return 0
        return index.frequency(word.lower()) or index.frequency(word)

    def vocabulary_size(self) -> int:
        return len(self._require_trained().index)

    # ------------- internals -------------

    def _require_trained(self) -> _Tables:
        """Current tables, read once per call."""
        state = self._state
        if not self._trained:
            raise UntrainedState()
        return state


def _confidence(frequency: float, total_tokens: int) -> float:
    if total_tokens == 0:
        return 0.0
    return min(frequency / total_tokens, 1.0)
