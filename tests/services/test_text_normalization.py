"""Unit tests for word normalization."""

import pytest

from word_lookup.services import normalize_word


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Run", "run"),
        ("  run  ", "run"),
        ("SERENDIPITY\n", "serendipity"),
        ("   ", ""),
        ("", ""),
    ],
)
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected


def test_normalize_none_is_empty():
    assert normalize_word(None) == ""
