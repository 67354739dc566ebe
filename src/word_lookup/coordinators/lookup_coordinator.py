"""Lookup Coordinator - Handles word searches and favorite toggling."""

from typing import Optional

from word_lookup.core import ActivityOutcome
from word_lookup.services import (
    DictionaryLookupResult,
    DictionaryService,
    UserActivityStore,
    normalize_word,
)


class LookupCoordinator:
    """
    Manages the search → dictionary lookup → activity recording workflow.

    Responsibilities:
    - Run lookups through the dictionary service
    - Record a search only when exact entries come back
    - Toggle favorites from the last lookup result
    """

    def __init__(
        self,
        dictionary_service: DictionaryService,
        activity_store: UserActivityStore,
    ):
        self.dictionary_service = dictionary_service
        self.activity_store = activity_store

        self.last_result: Optional[DictionaryLookupResult] = None

    def handle_search(self, word: str, category: Optional[str] = None) -> DictionaryLookupResult:
        """Look up a word. Lookup errors propagate and nothing is recorded."""
        result = self.dictionary_service.search(word)
        self.last_result = result
        if result.found:
            self.activity_store.add_search(result.query, category)
        return result

    def toggle_favorite(self, category: Optional[str] = None) -> ActivityOutcome:
        """
        Add or remove the last looked-up word from favorites.

        The first entry's part of speech and first definition are stored.
        """
        result = self.last_result
        if result is None or not result.found:
            return ActivityOutcome.SKIPPED_INVALID

        store = self.activity_store
        if store.is_favorite(result.query):
            word = normalize_word(result.query)
            favorite = next(
                (fav for fav in store.get_favorites() if normalize_word(fav.word) == word), None
            )
            if favorite is not None:
                return store.remove_favorite(favorite.id)

        entry = result.entries[0]
        definition = entry.definitions[0] if entry.definitions else ""
        return store.add_favorite(result.query, entry.part_of_speech, definition, category)
