"""User Activity Store - per-user search history, favorites, categories and stats."""

import json
import logging
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from word_lookup.core import (
    ActivityOutcome,
    CategoryStat,
    FavoriteWord,
    SearchItem,
    StatsSummary,
    UserStats,
    WordCategory,
    WordOfTheDay,
)
from word_lookup.core.activity_entities import serialize_list
from word_lookup.io import KeyValueStorage, StorageError, storage_keys
from word_lookup.services.text_processing import normalize_word
from word_lookup.services.word_of_the_day import (
    WORD_OF_THE_DAY_CANDIDATES,
    select_word_of_the_day,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    WordCategory("1", "Business", "bg-blue-100 text-blue-600 dark:bg-blue-900/40 dark:text-blue-300"),
    WordCategory("2", "Science", "bg-green-100 text-green-600 dark:bg-green-900/40 dark:text-green-300"),
    WordCategory("3", "Literature", "bg-purple-100 text-purple-600 dark:bg-purple-900/40 dark:text-purple-300"),
    WordCategory("4", "Technology", "bg-indigo-100 text-indigo-600 dark:bg-indigo-900/40 dark:text-indigo-300"),
]

CATEGORY_COLORS = [
    "bg-blue-100 text-blue-600 dark:bg-blue-900/40 dark:text-blue-300",
    "bg-green-100 text-green-600 dark:bg-green-900/40 dark:text-green-300",
    "bg-purple-100 text-purple-600 dark:bg-purple-900/40 dark:text-purple-300",
    "bg-red-100 text-red-600 dark:bg-red-900/40 dark:text-red-300",
    "bg-orange-100 text-orange-600 dark:bg-orange-900/40 dark:text-orange-300",
    "bg-indigo-100 text-indigo-600 dark:bg-indigo-900/40 dark:text-indigo-300",
]

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

FROM_HISTORY_DEFINITION = "Added from search history"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _day_key(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).date().isoformat()


def _default_categories() -> List[WordCategory]:
    return [WordCategory(c.id, c.name, c.color) for c in DEFAULT_CATEGORIES]


def _new_id() -> str:
    return uuid.uuid4().hex


class UserActivityStore:
    """Application service owning one user's lookup activity.

    The store is inert until ``initialize`` binds it to a user id. Every
    mutation writes the user's full snapshot through the KeyValueStorage
    before returning. Storage failures are logged and never raised; the
    in-memory state is kept even when a write fails.

    Args:
        storage: Persistence substrate. None keeps everything in memory.
        clock: Returns the current instant; calendar days are taken in UTC.
        word_candidates: Entries the word of the day rotates through.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        clock: Optional[Callable[[], datetime]] = None,
        word_candidates: Sequence[WordOfTheDay] = WORD_OF_THE_DAY_CANDIDATES,
    ) -> None:
        self._storage = storage
        self._clock = clock or _utc_now
        self._word_candidates = list(word_candidates)
        self._word_of_the_day: Optional[WordOfTheDay] = None
        self._clear_user_state()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def is_initialized(self) -> bool:
        return self._user_id is not None

    def initialize(self, user_id: str) -> ActivityOutcome:
        """Bind the store to ``user_id`` and load its persisted snapshot.

        Switching users discards previously loaded state, never merges it.
        Calling again with the bound user keeps the in-memory state and only
        re-checks the streak and the word of the day. On load the streak is
        only expired (dropped to 0 after a gap), never extended.
        """
        if not user_id or not str(user_id).strip():
            return ActivityOutcome.SKIPPED_INVALID

        if str(user_id) != self._user_id:
            self._clear_user_state()
            self._user_id = str(user_id)
            self._load_user_data()
        self._expire_streak()
        self._refresh_word_of_the_day()
        return ActivityOutcome.APPLIED

    def reset(self) -> None:
        """Forget the bound user and return to the uninitialized state."""
        self._clear_user_state()

    # ------------------------------------------------------------------
    # Search history
    # ------------------------------------------------------------------

    def add_search(self, word: str, category: Optional[str] = None) -> ActivityOutcome:
        normalized = normalize_word(word)
        if not normalized:
            return self._skip("add_search", ActivityOutcome.SKIPPED_INVALID)
        if not self.is_initialized:
            return self._skip("add_search", ActivityOutcome.SKIPPED_UNINITIALIZED)

        now = self._clock()
        item = SearchItem(id=_new_id(), word=normalized, timestamp=now, category=category)
        self._search_history.insert(0, item)

        self._stats.total_searches += 1
        self._stats.unique_words.add(normalized)
        self._stats.last_search_date = now
        # Streak is evaluated before today's bucket is claimed
        self._update_streak(now.astimezone(timezone.utc).date())
        today = _day_key(now)
        self._stats.search_dates[today] = self._stats.search_dates.get(today, 0) + 1

        self._save_user_data()
        return ActivityOutcome.APPLIED

    def get_search_history(self) -> List[SearchItem]:
        """Full history, most recent first."""
        return list(self._search_history)

    def get_recent_searches(self, limit: int = 5) -> List[SearchItem]:
        return self._search_history[: max(0, limit)]

    def remove_search_item(self, item_id: str) -> ActivityOutcome:
        """Remove one history item. Lifetime stats are not adjusted."""
        if not self.is_initialized:
            return self._skip("remove_search_item", ActivityOutcome.SKIPPED_UNINITIALIZED)

        remaining = [item for item in self._search_history if item.id != item_id]
        found = len(remaining) != len(self._search_history)
        self._search_history = remaining
        self._save_user_data()
        return ActivityOutcome.APPLIED if found else ActivityOutcome.SKIPPED_NOT_FOUND

    def clear_search_history(self) -> ActivityOutcome:
        """Empty the history. Lifetime stats are not reset."""
        if not self.is_initialized:
            return self._skip("clear_search_history", ActivityOutcome.SKIPPED_UNINITIALIZED)

        self._search_history = []
        self._save_user_data()
        return ActivityOutcome.APPLIED

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def add_favorite(
        self,
        word: str,
        part_of_speech: str,
        definition: str,
        category: Optional[str] = None,
    ) -> ActivityOutcome:
        normalized = normalize_word(word)
        if not normalized:
            return self._skip("add_favorite", ActivityOutcome.SKIPPED_INVALID)
        if not self.is_initialized:
            return self._skip("add_favorite", ActivityOutcome.SKIPPED_UNINITIALIZED)
        if self.is_favorite(normalized):
            return self._skip("add_favorite", ActivityOutcome.SKIPPED_DUPLICATE)

        favorite = FavoriteWord(
            id=_new_id(),
            word=normalized,
            part_of_speech=part_of_speech or "",
            definition=definition or "",
            added=self._clock(),
            category=category,
        )
        self._favorites.insert(0, favorite)
        self._save_user_data()
        return ActivityOutcome.APPLIED

    def add_favorite_from_history(self, item_id: str) -> ActivityOutcome:
        """Favorite the word of a history item, without part of speech."""
        if not self.is_initialized:
            return self._skip("add_favorite_from_history", ActivityOutcome.SKIPPED_UNINITIALIZED)

        item = next((i for i in self._search_history if i.id == item_id), None)
        if item is None:
            return self._skip("add_favorite_from_history", ActivityOutcome.SKIPPED_NOT_FOUND)
        return self.add_favorite(item.word, "", FROM_HISTORY_DEFINITION, item.category)

    def remove_favorite(self, favorite_id: str) -> ActivityOutcome:
        if not self.is_initialized:
            return self._skip("remove_favorite", ActivityOutcome.SKIPPED_UNINITIALIZED)

        remaining = [fav for fav in self._favorites if fav.id != favorite_id]
        found = len(remaining) != len(self._favorites)
        self._favorites = remaining
        self._save_user_data()
        return ActivityOutcome.APPLIED if found else ActivityOutcome.SKIPPED_NOT_FOUND

    def get_favorites(self) -> List[FavoriteWord]:
        """Favorites, most recently added first."""
        return list(self._favorites)

    def is_favorite(self, word: str) -> bool:
        normalized = normalize_word(word)
        return any(normalize_word(fav.word) == normalized for fav in self._favorites)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_categories(self) -> List[WordCategory]:
        return list(self._categories)

    def add_category(self, name: str, color: Optional[str] = None) -> ActivityOutcome:
        """Append a category; a palette color is picked when none is given."""
        trimmed = (name or "").strip()
        if not trimmed:
            return self._skip("add_category", ActivityOutcome.SKIPPED_INVALID)
        if not self.is_initialized:
            return self._skip("add_category", ActivityOutcome.SKIPPED_UNINITIALIZED)
        if any(cat.name.lower() == trimmed.lower() for cat in self._categories):
            return self._skip("add_category", ActivityOutcome.SKIPPED_DUPLICATE)

        if color is None:
            color = CATEGORY_COLORS[len(self._categories) % len(CATEGORY_COLORS)]
        self._categories.append(WordCategory(id=_new_id(), name=trimmed, color=color))
        self._save_user_data()
        return ActivityOutcome.APPLIED

    def remove_category(self, category_id: str) -> ActivityOutcome:
        """Remove a category. References on searches and favorites are left as is."""
        if not self.is_initialized:
            return self._skip("remove_category", ActivityOutcome.SKIPPED_UNINITIALIZED)

        remaining = [cat for cat in self._categories if cat.id != category_id]
        found = len(remaining) != len(self._categories)
        self._categories = remaining
        self._save_user_data()
        return ActivityOutcome.APPLIED if found else ActivityOutcome.SKIPPED_NOT_FOUND

    def get_category_stats(self) -> List[CategoryStat]:
        """Per-category usage, highest count first; ties keep definition order."""
        stats = []
        for category in self._categories:
            search_count = sum(1 for item in self._search_history if item.category == category.id)
            favorite_count = sum(1 for fav in self._favorites if fav.category == category.id)
            stats.append(
                CategoryStat(
                    name=category.name,
                    color=category.color,
                    count=search_count + favorite_count,
                )
            )
        return sorted(stats, key=lambda stat: stat.count, reverse=True)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self) -> StatsSummary:
        search_dates = self._stats.search_dates
        total_days = max(len(search_dates), 1)
        words_per_day = round(self._stats.total_searches / total_days, 1)

        most_active_day = "Sunday"
        max_count = 0
        day_counts: Dict[str, int] = {name: 0 for name in WEEKDAY_NAMES}
        for date_str in sorted(search_dates):
            try:
                weekday = WEEKDAY_NAMES[date.fromisoformat(date_str).weekday()]
            except ValueError:
                logger.debug("Ignoring malformed search date %r", date_str)
                continue
            day_counts[weekday] += search_dates[date_str]
            if day_counts[weekday] > max_count:
                max_count = day_counts[weekday]
                most_active_day = weekday

        return StatsSummary(
            total_searches=self._stats.total_searches,
            unique_words=len(self._stats.unique_words),
            streak=self._stats.consecutive_days,
            words_per_day=words_per_day,
            most_active_day=most_active_day,
        )

    # ------------------------------------------------------------------
    # Word of the day
    # ------------------------------------------------------------------

    def get_word_of_the_day(self) -> WordOfTheDay:
        """Today's featured word, selected and cached on first use each day."""
        self._refresh_word_of_the_day()
        return self._word_of_the_day

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _clear_user_state(self) -> None:
        self._user_id: Optional[str] = None
        self._search_history: List[SearchItem] = []
        self._favorites: List[FavoriteWord] = []
        self._categories: List[WordCategory] = _default_categories()
        self._stats = UserStats()

    def _skip(self, operation: str, outcome: ActivityOutcome) -> ActivityOutcome:
        logger.debug("%s skipped: %s", operation, outcome.value)
        return outcome

    def _update_streak(self, today: date) -> None:
        """Extend or restart the streak for a search made on ``today``.

        Must run before today's bucket is incremented.
        """
        if self._stats.last_search_date is None:
            return
        if self._stats.search_dates.get(today.isoformat(), 0) > 0:
            return
        yesterday = (today - timedelta(days=1)).isoformat()
        if self._stats.search_dates.get(yesterday, 0) > 0:
            self._stats.consecutive_days += 1
        else:
            self._stats.consecutive_days = 1

    def _expire_streak(self) -> None:
        """Drop a streak that ended before yesterday. Never extends it."""
        if self._stats.last_search_date is None:
            return
        today = self._clock().astimezone(timezone.utc).date()
        yesterday = today - timedelta(days=1)
        active = any(
            self._stats.search_dates.get(day.isoformat(), 0) > 0 for day in (today, yesterday)
        )
        if not active and self._stats.consecutive_days != 0:
            self._stats.consecutive_days = 0
            self._save_user_data()

    def _refresh_word_of_the_day(self) -> None:
        today = self._clock().astimezone(timezone.utc).date()
        current = self._word_of_the_day
        if current is not None and current.date == today.isoformat():
            return

        self._word_of_the_day = select_word_of_the_day(today, self._word_candidates)
        self._write(
            {storage_keys.WORD_OF_THE_DAY_KEY: json.dumps(self._word_of_the_day.to_dict())}
        )

    def _load_user_data(self) -> None:
        user_id = self._user_id

        history = self._read_json(storage_keys.search_history_key(user_id))
        if history is not None:
            self._search_history = self._parse(
                "search history", lambda: [SearchItem.from_dict(d) for d in history], []
            )

        favorites = self._read_json(storage_keys.favorites_key(user_id))
        if favorites is not None:
            self._favorites = self._parse(
                "favorites", lambda: [FavoriteWord.from_dict(d) for d in favorites], []
            )

        categories = self._read_json(storage_keys.categories_key(user_id))
        if categories is not None:
            self._categories = self._parse(
                "categories",
                lambda: [WordCategory.from_dict(d) for d in categories],
                _default_categories(),
            )

        stats = self._read_json(storage_keys.stats_key(user_id))
        parsed_stats = None
        if stats is not None:
            parsed_stats = self._parse("stats", lambda: UserStats.from_dict(stats), None)
        self._stats = parsed_stats if parsed_stats is not None else self._rebuild_stats()

        word_of_the_day = self._read_json(storage_keys.WORD_OF_THE_DAY_KEY)
        if word_of_the_day is not None:
            self._word_of_the_day = self._parse(
                "word of the day", lambda: WordOfTheDay.from_dict(word_of_the_day), None
            )

    def _rebuild_stats(self) -> UserStats:
        """Derive stats from the loaded history when no snapshot exists."""
        search_dates: Dict[str, int] = {}
        for item in self._search_history:
            day = _day_key(item.timestamp)
            search_dates[day] = search_dates.get(day, 0) + 1

        stats = UserStats(
            total_searches=len(self._search_history),
            unique_words={item.word for item in self._search_history},
            search_dates=search_dates,
        )
        if self._search_history:
            stats.last_search_date = max(item.timestamp for item in self._search_history)
            stats.consecutive_days = self._count_streak_days(search_dates)
        return stats

    def _count_streak_days(self, search_dates: Dict[str, int]) -> int:
        day = self._clock().astimezone(timezone.utc).date()
        if search_dates.get(day.isoformat(), 0) <= 0:
            day -= timedelta(days=1)
        streak = 0
        while search_dates.get(day.isoformat(), 0) > 0:
            streak += 1
            day -= timedelta(days=1)
        return streak

    def _read_json(self, key: str) -> Any:
        if self._storage is None:
            return None
        try:
            raw = self._storage.get(key)
        except StorageError as e:
            logger.error("Error loading user data for key %s: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Corrupt data stored under key %s: %s", key, e)
            return None

    def _parse(self, label: str, build: Callable[[], Any], default: Any) -> Any:
        try:
            return build()
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Error parsing stored %s for user %s: %s", label, self._user_id, e)
            return default

    def _save_user_data(self) -> None:
        if self._user_id is None:
            return
        user_id = self._user_id
        self._write(
            {
                storage_keys.search_history_key(user_id): json.dumps(
                    serialize_list(self._search_history)
                ),
                storage_keys.favorites_key(user_id): json.dumps(serialize_list(self._favorites)),
                storage_keys.categories_key(user_id): json.dumps(serialize_list(self._categories)),
                storage_keys.stats_key(user_id): json.dumps(self._stats.to_dict()),
            }
        )

    def _write(self, entries: Dict[str, str]) -> None:
        if self._storage is None:
            return
        try:
            self._storage.set_many(entries)
        except StorageError as e:
            logger.error("Error saving user data (%s): %s", ", ".join(entries), e)
