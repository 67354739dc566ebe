"""Storage key layout: per-user keys plus one global word-of-the-day key."""

WORD_OF_THE_DAY_KEY = "wordOfTheDay"


def search_history_key(user_id: str) -> str:
    return f"searchHistory_{user_id}"


def favorites_key(user_id: str) -> str:
    return f"favorites_{user_id}"


def categories_key(user_id: str) -> str:
    return f"categories_{user_id}"


def stats_key(user_id: str) -> str:
    return f"stats_{user_id}"
