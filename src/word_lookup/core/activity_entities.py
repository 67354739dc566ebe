"""User activity entities shared by the store, persistence and callers."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Set


class ActivityOutcome(Enum):
    """What a mutating store operation actually did."""

    APPLIED = "applied"
    SKIPPED_INVALID = "skipped_invalid"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    SKIPPED_UNINITIALIZED = "skipped_uninitialized"
    SKIPPED_NOT_FOUND = "skipped_not_found"

    @property
    def applied(self) -> bool:
        return self is ActivityOutcome.APPLIED


def to_epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def from_epoch_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


@dataclass
class SearchItem:
    id: str
    word: str
    timestamp: datetime
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "word": self.word,
            "timestamp": to_epoch_millis(self.timestamp),
        }
        if self.category is not None:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchItem":
        return cls(
            id=data["id"],
            word=data["word"],
            timestamp=from_epoch_millis(data["timestamp"]),
            category=data.get("category"),
        )


@dataclass
class FavoriteWord:
    id: str
    word: str
    part_of_speech: str
    definition: str
    added: datetime
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "word": self.word,
            "partOfSpeech": self.part_of_speech,
            "definition": self.definition,
            "added": to_epoch_millis(self.added),
        }
        if self.category is not None:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FavoriteWord":
        return cls(
            id=data["id"],
            word=data["word"],
            part_of_speech=data.get("partOfSpeech", ""),
            definition=data.get("definition", ""),
            added=from_epoch_millis(data["added"]),
            category=data.get("category"),
        )


@dataclass
class WordCategory:
    id: str
    name: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "color": self.color}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordCategory":
        return cls(id=data["id"], name=data["name"], color=data.get("color", ""))


@dataclass
class UserStats:
    """Lifetime counters for one user.

    ``total_searches`` and ``unique_words`` only ever grow: removing or
    clearing history leaves them untouched.
    """

    total_searches: int = 0
    unique_words: Set[str] = field(default_factory=set)
    last_search_date: Optional[datetime] = None
    consecutive_days: int = 0
    search_dates: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSearches": self.total_searches,
            "uniqueWords": sorted(self.unique_words),
            "lastSearchDate": (
                to_epoch_millis(self.last_search_date)
                if self.last_search_date is not None
                else None
            ),
            "consecutiveDays": self.consecutive_days,
            "searchDates": dict(self.search_dates),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserStats":
        last = data.get("lastSearchDate")
        return cls(
            total_searches=int(data.get("totalSearches", 0)),
            unique_words=set(data.get("uniqueWords") or []),
            last_search_date=from_epoch_millis(last) if last else None,
            consecutive_days=int(data.get("consecutiveDays", 0)),
            search_dates={
                day: int(count) for day, count in (data.get("searchDates") or {}).items()
            },
        )


@dataclass
class WordOfTheDay:
    word: str
    part_of_speech: str
    definition: str
    date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "partOfSpeech": self.part_of_speech,
            "definition": self.definition,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordOfTheDay":
        return cls(
            word=data["word"],
            part_of_speech=data.get("partOfSpeech", ""),
            definition=data.get("definition", ""),
            date=data.get("date"),
        )


@dataclass
class CategoryStat:
    name: str
    color: str
    count: int


@dataclass
class StatsSummary:
    """Dashboard-ready view of UserStats."""

    total_searches: int
    unique_words: int
    streak: int
    words_per_day: float
    most_active_day: str


def serialize_list(items: List[Any]) -> List[Dict[str, Any]]:
    return [item.to_dict() for item in items]
