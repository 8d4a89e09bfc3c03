# src/e2e/test_compat_facade.py
import pytest

from typeahead import Autocomplete, PredictionEngine, UntrainedState


def test_completions_are_plain_strings_with_length_tie_break():
    ac = Autocomplete()
    ac.train("peanut. pea. pizza. pasta.")
    assert ac.get_completions("p") == ["pea", "pasta", "pizza", "peanut"]


def test_completions_are_not_truncated():
    ac = Autocomplete()
    ac.train(" ".join(f"w{i}" for i in range(25)))
    assert len(ac.get_completions("w")) == 25


def test_next_word_and_phrase():
    ac = Autocomplete()
    ac.train("I want to eat a pizza. I want to eat a sandwich. I want to eat a sandwich.")
    assert ac.get_next_word("I want to eat a") == ["sandwich", "pizza"]
    assert ac.get_next_phrase("want") == ac.engine.get_next_phrase("want")
    assert all(isinstance(p, str) for p in ac.get_next_phrase("want"))


def test_legacy_stats_shape():
    ac = Autocomplete()
    ac.train("Coffee is good for health. Coffee is good for the heart.")
    stats = ac.get_stats()
    assert stats["total_words"] == 7
    assert stats["total_phrases"] == 0
    assert stats["total_ngrams"] == 9
    assert stats["average_word_frequency"] == pytest.approx(11 / 7)


def test_wraps_existing_engine_and_readiness():
    eng = PredictionEngine()
    ac = Autocomplete(eng)
    assert not ac.is_ready()
    with pytest.raises(UntrainedState):
        ac.get_completions("a")
    eng.train("alpha.")
    assert ac.is_ready()
    assert ac.get_completions("al") == ["alpha"]
