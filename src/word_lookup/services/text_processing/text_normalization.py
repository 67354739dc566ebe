"""Text normalization utilities for consistent word keying."""


def normalize_word(word: str) -> str:
    """
    Normalize a search or favorite term into its equality key.

    Rules:
    - Trim leading and trailing whitespace
    - Lowercase

    Args:
        word: Term as typed by the user.

    Returns:
        Normalized word, empty if the input was blank.
    """
    return (word or "").strip().lower()
