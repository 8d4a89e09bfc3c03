"""
Corpus Loading

Reads training text from folders of .txt files. The engine itself never
touches the filesystem; the CLI and the web frontend use this module to
source corpus text and hand it to PredictionEngine.

Key Functions:
    load_corpus(roots): one text per non-empty *.txt file under the roots
    _iter_txt_files(roots): find all *.txt files in the given folders
"""

# src/typeahead/loader.py
from __future__ import annotations
import fnmatch
import logging
import os
from typing import Iterable, List

from .config import ENCODING, GLOB_PATTERN

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500


def _iter_txt_files(roots: Iterable[str]) -> List[str]:
    """
    Find all files matching GLOB_PATTERN under each root, recursively.

    Returns a sorted list so that training order (and therefore every count)
    is reproducible. A root that is a file is taken as-is.

    Raises:
        FileNotFoundError: if a root does not exist.
    """
    files: List[str] = []
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            files.append(root)
            continue
        if not os.path.isdir(root):
            raise FileNotFoundError(root)
        for dirpath, _, filenames in os.walk(root):
            for fn in filenames:
                if fnmatch.fnmatch(fn.lower(), GLOB_PATTERN):
                    files.append(os.path.join(dirpath, fn))
    files.sort()
    return files


def load_corpus(roots: Iterable[str]) -> List[str]:
    """
    Load every *.txt file under roots and return their texts.

    Each file becomes its own document, so sentence state never leaks from
    one file into the next when the documents are processed one by one.
    Undecodable bytes are ignored; empty or whitespace-only files are
    skipped; unreadable files are logged and skipped.

    Example:
        >>> docs = load_corpus(["/path/to/notes"])
        >>> engine = create_from_multiple_sources(docs)
    """
    docs: List[str] = []
    file_count = 0
    for path in _iter_txt_files(roots):
        try:
            with open(path, "r", encoding=ENCODING, errors="ignore") as f:
                text = f.read()
        except OSError as exc:
            log.warning("Skipping unreadable file %s: %s", path, exc)
            continue
        file_count += 1
        if text.strip():
            docs.append(text)
        if file_count % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d", file_count)

    log.info("Loaded corpus: files=%d documents=%d", file_count, len(docs))
    return docs
