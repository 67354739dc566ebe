"""Services layer - business logic and external integrations."""

from word_lookup.services.dictionary_service import (
    DictionaryEntry,
    DictionaryLookupError,
    DictionaryLookupResult,
    DictionaryService,
)
from word_lookup.services.settings_manager import SettingsManager
from word_lookup.services.user_activity_store import UserActivityStore
from word_lookup.services.word_of_the_day import (
    DEFAULT_WORD_OF_THE_DAY,
    WORD_OF_THE_DAY_CANDIDATES,
    select_word_of_the_day,
)

# Text processing services
from word_lookup.services.text_processing import normalize_word

__all__ = [
    "DictionaryEntry",
    "DictionaryLookupError",
    "DictionaryLookupResult",
    "DictionaryService",
    "SettingsManager",
    "UserActivityStore",
    "DEFAULT_WORD_OF_THE_DAY",
    "WORD_OF_THE_DAY_CANDIDATES",
    "select_word_of_the_day",
    "normalize_word",
]
