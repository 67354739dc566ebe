"""Tests for the command line entry point."""

import pytest

from word_lookup.main import main


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    monkeypatch.setenv("WORD_LOOKUP_DATA_PATH", str(tmp_path / "cli.db"))
    monkeypatch.setenv("DICTIONARY_API_KEY", "")
    return tmp_path


def test_lookup_then_stats(cli_env, capsys):
    assert main(["lookup", "example", "--user", "u1"]) == 0
    assert "example (noun)" in capsys.readouterr().out

    assert main(["stats", "--user", "u1"]) == 0
    out = capsys.readouterr().out
    assert "Total searches:  1" in out


def test_favorite_toggle(cli_env, capsys):
    assert main(["favorite", "example", "--user", "u1"]) == 0
    assert "applied" in capsys.readouterr().out


def test_word_of_the_day(cli_env, capsys):
    assert main(["word-of-the-day"]) == 0
    assert "(" in capsys.readouterr().out
