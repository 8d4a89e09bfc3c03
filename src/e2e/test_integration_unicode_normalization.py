from pathlib import Path
import pytest
from typeahead import create_from_multiple_sources
from typeahead.loader import load_corpus

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    (root / "mix.txt").write_text(
        "Café con leche.\n"
        "A naïve approach appears here.\n",
        encoding="utf-8",
    )
    return str(root)

@pytest.mark.e2e
def test_unicode_words_survive_tokenization(tmp_path: Path):
    eng = create_from_multiple_sources(load_corpus([_seed(tmp_path)]))
    assert [r.word for r in eng.get_completions("CAF")] == ["café"]
    assert [r.word for r in eng.get_completions("naï")] == ["naïve"]
    assert [r.word for r in eng.get_next_word("café con")] == ["leche"]
