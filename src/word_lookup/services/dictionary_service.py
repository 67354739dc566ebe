"""Dictionary Service - Merriam-Webster style HTTP lookups."""

import copy
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from word_lookup.services.settings_manager import DEFAULT_DICTIONARY_API_URL

logger = logging.getLogger(__name__)

AUDIO_BASE_URL = "https://media.merriam-webster.com/audio/prons/en/us/mp3"
MAX_SUGGESTIONS = 5

SAMPLE_ENTRY: Dict[str, Any] = {
    "meta": {
        "id": "example",
        "uuid": "sample-uuid-123",
        "src": "sample",
        "stems": ["example", "examples"],
        "offensive": False,
    },
    "hwi": {
        "hw": "ex*am*ple",
        "prs": [{"mw": "ig-ˈzam-pəl", "sound": {"audio": "example01"}}],
    },
    "fl": "noun",
    "shortdef": [
        "a representative instance",
        "a pattern or model",
        "an instance serving to illustrate a rule",
    ],
}


class DictionaryLookupError(Exception):
    """Raised when the dictionary API cannot be reached or answers badly."""


@dataclass
class DictionaryEntry:
    """Structured entry for display."""

    headword: str
    part_of_speech: str
    definitions: List[str]
    pronunciation: Optional[str] = None
    audio_url: Optional[str] = None


@dataclass
class DictionaryLookupResult:
    """Either exact entries or spelling suggestions for a query."""

    query: str
    entries: List[DictionaryEntry] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.entries)


def build_audio_url(audio: Optional[str]) -> Optional[str]:
    """Derive the pronunciation mp3 URL from an audio file name."""
    if not audio:
        return None
    if audio.startswith("bix"):
        subdirectory = "bix"
    elif audio.startswith("gg"):
        subdirectory = "gg"
    elif re.match(r"^[\d\W_]", audio):
        subdirectory = "number"
    else:
        subdirectory = audio[0]
    return f"{AUDIO_BASE_URL}/{subdirectory}/{audio}.mp3"


def parse_entry(raw: Dict[str, Any]) -> DictionaryEntry:
    hwi = raw.get("hwi") or {}
    headword = (hwi.get("hw") or raw.get("meta", {}).get("id") or "").replace("*", "")
    pronunciation = None
    audio_url = None
    prs = hwi.get("prs") or []
    if prs:
        pronunciation = prs[0].get("mw")
        audio_url = build_audio_url((prs[0].get("sound") or {}).get("audio"))
    return DictionaryEntry(
        headword=headword,
        part_of_speech=raw.get("fl") or "",
        definitions=list(raw.get("shortdef") or []),
        pronunciation=pronunciation,
        audio_url=audio_url,
    )


class DictionaryService:
    """Wraps the dictionary HTTP API.

    Without an API key a built-in sample entry is returned for every word.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = DEFAULT_DICTIONARY_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._api_key = api_key
        self._api_url = api_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def search(self, word: str) -> DictionaryLookupResult:
        query = (word or "").strip()
        if not query:
            return DictionaryLookupResult(query="")

        payload = self._fetch(query)
        if not isinstance(payload, list):
            raise DictionaryLookupError(f"Unexpected response shape for '{query}'")

        if payload and all(isinstance(item, str) for item in payload):
            return DictionaryLookupResult(query=query, suggestions=payload[:MAX_SUGGESTIONS])

        entries = [parse_entry(item) for item in payload if isinstance(item, dict)]
        return DictionaryLookupResult(query=query, entries=entries)

    def close(self) -> None:
        self._client.close()

    def _fetch(self, query: str) -> Any:
        if not self._api_key:
            logger.warning("Dictionary API key is missing. Using sample data.")
            return [self._sample_for(query)]

        url = f"{self._api_url}/{quote(query)}"
        try:
            response = self._client.get(url, params={"key": self._api_key})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("Dictionary API error (%s) for '%s'", exc.response.status_code, query)
            raise DictionaryLookupError(
                f"API error: {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Dictionary lookup failed for '%s': %s", query, exc)
            raise DictionaryLookupError("Failed to fetch word information") from exc

    @staticmethod
    def _sample_for(query: str) -> Dict[str, Any]:
        sample = copy.deepcopy(SAMPLE_ENTRY)
        sample["meta"]["id"] = query
        sample["meta"]["stems"] = [query]
        sample["hwi"]["hw"] = query
        return sample
