from __future__ import annotations
from array import array
from typing import Dict, Iterator, List, Tuple

_ROOT = 0


class PrefixIndex:
    """
    Character trie keyed by words, counting how often each word was inserted.

    Nodes live in an arena of parallel arrays addressed by integer index
    (node 0 is the root):
      _edges[i]    : dict char -> child index
      _terminal[i] : 1 if a word ends at node i
      _freq[i]     : occurrence count, meaningful only when terminal

    No node holds a reference to another node object, so once training stops
    the structure can be read from several threads without coordination.

    Complexity: insert / contains / frequency are O(len(word));
    find_with_prefix is O(len(prefix) + size of the matching subtree).
    """

    __slots__ = ("_edges", "_terminal", "_freq", "_words")

    def __init__(self) -> None:
        self._edges: List[Dict[str, int]] = [{}]
        self._terminal = bytearray(1)
        self._freq = array("Q", [0])
        self._words = 0

    # -------- Build-time API --------
    def insert(self, word: str, frequency_delta: int = 1) -> None:
        """Add frequency_delta to word's count. Empty words and non-positive deltas are ignored."""
        if not word or frequency_delta <= 0:
            return
        node = _ROOT
        for ch in word:
            nxt = self._edges[node].get(ch)
            if nxt is None:
                nxt = self._new_node()
                self._edges[node][ch] = nxt
            node = nxt
        if not self._terminal[node]:
            self._terminal[node] = 1
            self._words += 1
        self._freq[node] += frequency_delta

    def _new_node(self) -> int:
        self._edges.append({})
        self._terminal.append(0)
        self._freq.append(0)
        return len(self._edges) - 1

    # -------- Lookup --------
    def _walk(self, key: str) -> int:
        """Index of the node reached by key, or -1 if some character is unmatched."""
        node = _ROOT
        for ch in key:
            nxt = self._edges[node].get(ch)
            if nxt is None:
                return -1
            node = nxt
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node > _ROOT and bool(self._terminal[node])

    def frequency(self, word: str) -> int:
        node = self._walk(word)
        if node <= _ROOT or not self._terminal[node]:
            return 0
        return int(self._freq[node])

    def find_with_prefix(self, prefix: str) -> List[Tuple[str, int]]:
        """
        All (word, frequency) pairs whose word starts with prefix.

        An unmatched prefix yields []. The order is unspecified; callers rank.
        An empty prefix yields every word.
        """
        node = self._walk(prefix)
        if node < 0:
            return []
        return list(self._collect(node, prefix))

    def _collect(self, start: int, prefix: str) -> Iterator[Tuple[str, int]]:
        # iterative DFS; words are rebuilt from the edge labels on the way down
        stack = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if self._terminal[node]:
                yield word, int(self._freq[node])
            for ch, child in self._edges[node].items():
                stack.append((child, word + ch))

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield every (word, frequency) in the index."""
        return self._collect(_ROOT, "")

    # -------- Introspection --------
    @property
    def node_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)
