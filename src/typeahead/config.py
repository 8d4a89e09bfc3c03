from __future__ import annotations
import os

# result caps
MAX_COMPLETIONS: int = 10
MAX_PREDICTIONS: int = 5

# next-word scoring: trigram evidence counts double
TRIGRAM_WEIGHT: int = 2
BIGRAM_WEIGHT: int = 1

# next-phrase scoring: phrase length (words) -> decay factor
PHRASE_DECAY: dict[int, float] = {2: 1.0, 3: 0.8, 4: 0.6}
PHRASE_BRANCHES: int = 5     # candidates expanded per step

# tokenization
MIN_WORD_LENGTH: int = 1
MAX_WORD_LENGTH: int = 50
SENTENCE_TERMINATORS: str = ".!?"

# similarity search
SIMILARITY_THRESHOLD: float = 0.7

# corpus loading
GLOB_PATTERN: str = "*.txt"
ENCODING: str = "utf-8"

# Progress logging (set TYPEAHEAD_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("TYPEAHEAD_VERBOSE") == "1"
