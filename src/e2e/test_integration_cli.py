import json
from pathlib import Path
import pytest
from typeahead.__main__ import main

@pytest.mark.e2e
def test_cli_complete_json(capsys):
    rc = main(["--text", "pizza. peanut. pasta.", "--complete", "p", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert [row["word"] for row in data["complete"]] == ["pasta", "peanut", "pizza"]

@pytest.mark.e2e
def test_cli_legacy_completions_are_strings(capsys):
    rc = main(["--text", "peanut. pea. pizza. pasta.", "--complete", "p", "--legacy", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"complete": ["pea", "pasta", "pizza", "peanut"]}

@pytest.mark.e2e
def test_cli_next_phrase_and_stats(capsys):
    corpus = "Coffee is good for health. Coffee is good for the heart."
    rc = main(["--text", corpus, "--next", "coffee is", "--phrase", "coffee is", "-k", "2", "--stats"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "[next]" in out and "good" in out
    assert "[phrases]" in out and "good for health" in out
    assert '"unique_words": 7' in out

@pytest.mark.e2e
def test_cli_common_words_from_sample(capsys):
    rc = main(["--sample", "demo", "--common", "3", "--json"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)["common"]
    assert len(rows) == 3
    assert rows[0]["frequency"] >= rows[-1]["frequency"]

@pytest.mark.e2e
def test_cli_roots(tmp_path: Path, capsys):
    (tmp_path / "a.txt").write_text("tea is hot.", encoding="utf-8")
    (tmp_path / "b.txt").write_text("tea is cold.", encoding="utf-8")
    rc = main(["--roots", str(tmp_path), "--next", "tea is", "--json"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)["next"]
    assert [r["word"] for r in rows] == ["cold", "hot"]

@pytest.mark.e2e
def test_cli_errors_exit_2(tmp_path: Path, capsys):
    assert main(["--text", "   ", "--complete", "a"]) == 2
    assert "error:" in capsys.readouterr().err
    assert main(["--roots", str(tmp_path / "missing")]) == 2
    (tmp_path / "empty").mkdir()
    assert main(["--roots", str(tmp_path / "empty")]) == 2

@pytest.mark.e2e
def test_cli_repl(monkeypatch, capsys):
    lines = iter(["piz", "want to ", ":phrase coffee is", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    rc = main(["--sample", "demo", "--repl"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "pizza" in out
    assert "[next]" in out and "eat" in out
    assert "[phrases]" in out
