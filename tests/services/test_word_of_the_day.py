"""Unit tests for word of the day selection."""

from datetime import date, timedelta

from word_lookup.core import WordOfTheDay
from word_lookup.services import (
    DEFAULT_WORD_OF_THE_DAY,
    WORD_OF_THE_DAY_CANDIDATES,
    select_word_of_the_day,
)
from word_lookup.services.word_of_the_day import day_of_year


def test_day_of_year_starts_at_one():
    assert day_of_year(date(2024, 1, 1)) == 1
    assert day_of_year(date(2024, 12, 31)) == 366


def test_days_with_same_remainder_pick_same_entry():
    assert len(WORD_OF_THE_DAY_CANDIDATES) == 7
    day_10 = date(2025, 1, 10)
    day_17 = date(2025, 1, 17)

    first = select_word_of_the_day(day_10)
    second = select_word_of_the_day(day_17)

    assert first.word == second.word
    assert first.word == WORD_OF_THE_DAY_CANDIDATES[3].word


def test_selection_records_date():
    chosen = select_word_of_the_day(date(2025, 6, 1))
    assert chosen.date == "2025-06-01"


def test_consecutive_days_rotate():
    start = date(2025, 2, 1)
    words = [select_word_of_the_day(start + timedelta(days=i)).word for i in range(7)]
    assert len(set(words)) == 7


def test_empty_candidates_fall_back_to_default():
    chosen = select_word_of_the_day(date(2025, 1, 1), candidates=[])
    assert chosen.word == DEFAULT_WORD_OF_THE_DAY.word == "perspicacious"


def test_custom_candidates():
    candidates = [WordOfTheDay("a", "noun", "first"), WordOfTheDay("b", "noun", "second")]
    assert select_word_of_the_day(date(2025, 1, 2), candidates).word == "a"
