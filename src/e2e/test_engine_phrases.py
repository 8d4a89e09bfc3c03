# src/e2e/test_engine_phrases.py
import pytest

from typeahead import PredictionEngine
from typeahead import config as CFG

COFFEE = "Coffee is good for health. Coffee is good for the heart."


@pytest.fixture
def coffee_engine():
    eng = PredictionEngine()
    eng.train(COFFEE)
    return eng


def test_phrases_after_coffee_is(coffee_engine):
    assert coffee_engine.get_next_phrase("Coffee is") == [
        "good for",
        "good for health",
        "good for the",
        "good for the heart",
    ]


def test_phrases_are_two_to_four_words(coffee_engine):
    for phrase in coffee_engine.get_next_phrase("coffee"):
        assert 2 <= len(phrase.split()) <= 4


def test_phrase_limit(coffee_engine):
    assert coffee_engine.get_next_phrase("coffee is", max_results=1) == ["good for"]
    assert coffee_engine.get_next_phrase("coffee is", max_results=0) == []


def test_no_phrases_without_successors(coffee_engine):
    assert coffee_engine.get_next_phrase("heart") == []
    assert coffee_engine.get_next_phrase("unknown") == []


def test_equal_scores_break_alphabetically():
    eng = PredictionEngine()
    eng.train("x a end. x b end. a end. b end.")
    phrases = eng.get_next_phrase("x")
    assert phrases[:2] == ["a end", "b end"]


def test_default_decay_policy():
    assert CFG.PHRASE_DECAY == {2: 1.0, 3: 0.8, 4: 0.6}
    assert CFG.PHRASE_BRANCHES == 5


def test_decay_is_configurable():
    eng = PredictionEngine(phrase_decay={2: 0.1, 3: 1.0})
    eng.train(COFFEE)
    phrases = eng.get_next_phrase("coffee is")
    assert phrases[:2] == ["good for health", "good for the"]
    assert phrases[-1] == "good for"
    assert all(len(p.split()) <= 3 for p in phrases)


def test_branching_limit():
    eng = PredictionEngine(phrase_branches=1)
    eng.train("go north now. go south now. go north fast.")
    # only the top first word ("north") and its top successor ("fast") survive
    assert eng.get_next_phrase("go") == ["north fast"]
