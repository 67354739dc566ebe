"""Word of the day - deterministic date-based selection from a fixed list."""

from datetime import date
from typing import List, Sequence

from word_lookup.core import WordOfTheDay

DEFAULT_WORD_OF_THE_DAY = WordOfTheDay(
    word="perspicacious",
    part_of_speech="adjective",
    definition=(
        "having or showing an ability to notice and understand things that are "
        "difficult or not obvious"
    ),
)

WORD_OF_THE_DAY_CANDIDATES: List[WordOfTheDay] = [
    DEFAULT_WORD_OF_THE_DAY,
    WordOfTheDay("ephemeral", "adjective", "lasting for a very short time"),
    WordOfTheDay(
        "serendipity",
        "noun",
        "the occurrence and development of events by chance in a happy or beneficial way",
    ),
    WordOfTheDay("eloquent", "adjective", "fluent or persuasive in speaking or writing"),
    WordOfTheDay("ubiquitous", "adjective", "present, appearing, or found everywhere"),
    WordOfTheDay(
        "pernicious",
        "adjective",
        "having a harmful effect, especially in a gradual or subtle way",
    ),
    WordOfTheDay("mellifluous", "adjective", "sweet or musical; pleasant to hear"),
]


def day_of_year(day: date) -> int:
    """Ordinal day of the year, 1 for January 1st."""
    return day.timetuple().tm_yday


def select_word_of_the_day(
    day: date, candidates: Sequence[WordOfTheDay] = WORD_OF_THE_DAY_CANDIDATES
) -> WordOfTheDay:
    """Pick the entry for ``day``; same day always yields the same entry.

    Falls back to the default entry when no candidates are given.
    """
    if not candidates:
        chosen = DEFAULT_WORD_OF_THE_DAY
    else:
        chosen = candidates[day_of_year(day) % len(candidates)]
    return WordOfTheDay(
        word=chosen.word,
        part_of_speech=chosen.part_of_speech,
        definition=chosen.definition,
        date=day.isoformat(),
    )
