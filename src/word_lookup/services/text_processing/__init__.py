"""Text processing services."""

from word_lookup.services.text_processing.text_normalization import normalize_word

__all__ = ["normalize_word"]
