"""
Text cleaning and tokenization.

The same routines are used for training and for queries, so a prefix or a
context is always cut into tokens exactly the way the corpus was.

Normalization process (defaults):
    1. Replace punctuation and symbols with spaces
    2. Collapse whitespace runs into single spaces and trim
    3. Lowercase
Digits are kept unless remove_numbers is set.
"""

from __future__ import annotations
import re
from typing import Iterable, List, Optional

from .config import MIN_WORD_LENGTH, MAX_WORD_LENGTH, SENTENCE_TERMINATORS

_ws_re = re.compile(r"\s+")
_punct_re = re.compile(r"[^\w\s]")
_digits_re = re.compile(r"\d+")
_sentence_re = re.compile("[" + re.escape(SENTENCE_TERMINATORS) + "]+")

ENGLISH_STOP_WORDS = frozenset("""
a an and are as at be by for from has he in is it its of on that the to was
will with this but they have had what said each which she do how their if up
out many then them these so some her would make like into him time two more
go no way could my than first been call who now find long down day did get
come made may part
""".split())


def clean_text(
    text: str,
    *,
    remove_punctuation: bool = True,
    remove_numbers: bool = False,
    normalize_whitespace: bool = True,
    lowercase: bool = True,
) -> str:
    """
    Clean raw text. Each step can be switched off independently.

    Punctuation and digits are replaced by spaces rather than deleted so that
    neighbouring words never fuse ("end.Start" -> "end Start").

    Example:
        >>> clean_text("Hello, World!  Room 101")
        'hello world room 101'
        >>> clean_text("Hello, World!", lowercase=False, remove_punctuation=False)
        'Hello, World!'
    """
    cleaned = text
    if remove_punctuation:
        cleaned = _punct_re.sub(" ", cleaned)
    if remove_numbers:
        cleaned = _digits_re.sub(" ", cleaned)
    if normalize_whitespace:
        cleaned = _ws_re.sub(" ", cleaned).strip()
    if lowercase:
        cleaned = cleaned.lower()
    return cleaned


def tokenize(
    text: str,
    *,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
    stop_words: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Split cleaned text on whitespace and filter the tokens.

    Tokens shorter than min_length or longer than max_length are dropped.
    When stop_words is given, tokens whose lowercased form is in it are
    dropped as well.
    """
    words = [w for w in text.split() if min_length <= len(w) <= max_length]
    if stop_words:
        stops = {s.lower() for s in stop_words}
        words = [w for w in words if w.lower() not in stops]
    return words


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence terminators; blank pieces are dropped."""
    return [s for s in (p.strip() for p in _sentence_re.split(text)) if s]


def trailing_sentence(text: str) -> str:
    """
    Return the text after the last sentence terminator.

    Used for query contexts: predictions never reach back across a sentence
    break, so "We ate. Then we" only looks at "Then we", and "We ate." has no
    usable context at all.
    """
    return _sentence_re.split(text)[-1]


def sentence_tokens(
    text: str,
    *,
    case_sensitive: bool = False,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> List[List[str]]:
    """Training pipeline: one token list per non-empty sentence."""
    out: List[List[str]] = []
    for sentence in split_sentences(text):
        toks = tokenize(
            clean_text(sentence, lowercase=not case_sensitive),
            min_length=min_length,
            max_length=max_length,
        )
        if toks:
            out.append(toks)
    return out


def query_tokens(text: str, *, case_sensitive: bool = False) -> List[str]:
    """Tokens of a query context, limited to its trailing sentence."""
    return clean_text(trailing_sentence(text), lowercase=not case_sensitive).split()
