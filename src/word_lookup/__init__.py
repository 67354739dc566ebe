"""
Word Lookup - a dictionary companion with per-user activity tracking.

This package provides:
- Dictionary lookups with pronunciation audio links
- Search history, favorites and categories per user
- Streak and usage statistics
- A rotating word of the day
"""

__version__ = "0.1.0"
__author__ = "Pablo-mercado"

# Make key components available at package level
from word_lookup.core import ActivityOutcome, FavoriteWord, SearchItem, WordCategory
from word_lookup.services import UserActivityStore

__all__ = [
    "ActivityOutcome",
    "FavoriteWord",
    "SearchItem",
    "WordCategory",
    "UserActivityStore",
]
