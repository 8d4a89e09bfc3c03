from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Union

from .config import MAX_COMPLETIONS, SIMILARITY_THRESHOLD
from .engine import PredictionEngine
from .models import SimilarWord, SuggestionResult

ResultLike = Union[SuggestionResult, Mapping[str, Any]]

_SORT_KEYS: Dict[str, Callable[[SuggestionResult], Any]] = {
    "frequency": lambda r: -r.frequency,
    "alphabetical": lambda r: r.word,
    "length": lambda r: len(r.word),
    "confidence": lambda r: -(r.confidence or 0.0),
}


def _as_result(item: ResultLike) -> SuggestionResult:
    """Accept SuggestionResult-like objects or JSON rows ({"word", "frequency", "confidence"?})."""
    if isinstance(item, Mapping):
        return SuggestionResult(
            word=item["word"],
            frequency=item.get("frequency", 0),
            confidence=item.get("confidence", 0.0) or 0.0,
        )
    return SuggestionResult(word=item.word, frequency=item.frequency, confidence=getattr(item, "confidence", 0.0))


def merge_suggestions(
    result_lists: Sequence[Iterable[ResultLike]],
    *,
    max_results: int = MAX_COMPLETIONS,
    weight_by_source: bool = False,
) -> List[SuggestionResult]:
    """
    Union suggestions coming from several independently trained engines.

    Results are keyed by word. Colliding frequencies are summed; with
    weight_by_source the list at position N contributes frequency / (N + 1).
    The highest confidence seen for a word is kept. Output is sorted by the
    combined frequency (word ascending on ties) and cut to max_results.

    Example:
        >>> merge_suggestions([[{"word": "dev", "frequency": 3}], [{"word": "dev", "frequency": 2}]])
        [SuggestionResult(word='dev', frequency=5, confidence=0.0)]
    """
    freq: Dict[str, float] = {}
    conf: Dict[str, float] = {}
    for source, results in enumerate(result_lists):
        weight = 1 / (source + 1) if weight_by_source else 1
        for item in results:
            r = _as_result(item)
            freq[r.word] = freq.get(r.word, 0) + r.frequency * weight
            conf[r.word] = max(conf.get(r.word, 0.0), r.confidence)

    merged = [SuggestionResult(word=w, frequency=f, confidence=conf[w]) for w, f in freq.items()]
    merged.sort(key=lambda r: (-r.frequency, r.word))
    return merged[:max(0, max_results)]


def filter_suggestions(
    suggestions: Iterable[SuggestionResult],
    predicate: Callable[[SuggestionResult], bool],
) -> List[SuggestionResult]:
    return [s for s in suggestions if predicate(s)]


def sort_suggestions(suggestions: Iterable[SuggestionResult], sort_by: str = "frequency") -> List[SuggestionResult]:
    """Return a sorted copy: "frequency", "alphabetical", "length" or "confidence"."""
    try:
        key = _SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(f"Unsupported sort key: {sort_by!r} (expected one of {sorted(_SORT_KEYS)})") from None
    return sorted(suggestions, key=key)


# ---- similarity ----

def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions turning a into b."""
    if len(a) < len(b):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cur.append(min(
                prev[j] + 1,               # delete
                cur[j - 1] + 1,            # insert
                prev[j - 1] + (ca != cb),  # substitute
            ))
        prev = cur
    return prev[-1]


def calculate_word_similarity(a: str, b: str) -> float:
    """1 - distance / longer length, in [0, 1]; two empty strings are identical (1.0)."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein_distance(a, b) / longest


def find_similar_words(
    target: str,
    candidates: Iterable[Union[str, ResultLike]],
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[SimilarWord]:
    """Candidates at least `threshold` similar to target, most similar first (stable on ties)."""
    out: List[SimilarWord] = []
    for cand in candidates:
        r = SuggestionResult(word=cand, frequency=0) if isinstance(cand, str) else _as_result(cand)
        sim = calculate_word_similarity(target, r.word)
        if sim >= threshold:
            out.append(SimilarWord(word=r.word, similarity=sim, frequency=r.frequency, confidence=r.confidence))
    out.sort(key=lambda s: -s.similarity)
    return out


# ---- composition ----

def create_from_multiple_sources(sources: Iterable[str], **engine_kwargs: Any) -> PredictionEngine:
    """
    Build one engine whose counts accumulate over several corpora.

    Uses the additive process_corpus() primitive; train() would discard the
    previous source each time. Document boundaries never bridge sentences.
    """
    engine = PredictionEngine(**engine_kwargs)
    for text in sources:
        engine.process_corpus(text)
    return engine
