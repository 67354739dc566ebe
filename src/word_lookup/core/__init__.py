"""Domain layer - Pure entities representing a user's lookup activity."""

from .activity_entities import (
    ActivityOutcome,
    CategoryStat,
    FavoriteWord,
    SearchItem,
    StatsSummary,
    UserStats,
    WordCategory,
    WordOfTheDay,
)

__all__ = [
    "ActivityOutcome",
    "CategoryStat",
    "FavoriteWord",
    "SearchItem",
    "StatsSummary",
    "UserStats",
    "WordCategory",
    "WordOfTheDay",
]
