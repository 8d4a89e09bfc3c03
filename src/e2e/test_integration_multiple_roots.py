from pathlib import Path
import pytest
from typeahead import create_from_multiple_sources
from typeahead.loader import load_corpus

def _seed_multi(tmp: Path) -> list[str]:
    r1 = tmp / "A"; r1.mkdir()
    r2 = tmp / "B"; r2.mkdir()
    (r1 / "a.txt").write_text("alpha beta\ngamma delta\nto be or not\n", encoding="utf-8")
    (r2 / "b.txt").write_text("another root\nbeta gamma\nnot to be?\n", encoding="utf-8")
    (r2 / "skip.md").write_text("ignored words here", encoding="utf-8")
    (r2 / "blank.txt").write_text("   \n", encoding="utf-8")
    return [str(r1), str(r2)]

@pytest.mark.e2e
def test_multiple_roots_discovery(tmp_path: Path):
    docs = load_corpus(_seed_multi(tmp_path))
    assert len(docs) == 2
    eng = create_from_multiple_sources(docs)
    # counts from both roots accumulate
    assert eng.word_frequency("beta") == 2
    assert eng.word_frequency("another") == 1
    assert not eng.has_word("ignored")

@pytest.mark.e2e
def test_documents_do_not_bridge(tmp_path: Path):
    (tmp_path / "1.txt").write_text("tea is hot", encoding="utf-8")
    (tmp_path / "2.txt").write_text("cold tea is", encoding="utf-8")
    eng = create_from_multiple_sources(load_corpus([str(tmp_path)]))
    # "hot" ends one file, "cold" starts the next
    assert eng.get_next_word("hot") == []
    assert [r.word for r in eng.get_next_word("tea")] == ["is"]

@pytest.mark.e2e
def test_file_root_and_missing_root(tmp_path: Path):
    f = tmp_path / "one.txt"; f.write_text("single file corpus.", encoding="utf-8")
    assert load_corpus([str(f)]) == ["single file corpus."]
    with pytest.raises(FileNotFoundError):
        load_corpus([str(tmp_path / "nope")])
