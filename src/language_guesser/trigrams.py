"""Text normalization and trigram frequency profiles."""

from __future__ import annotations

import unicodedata
from collections import Counter

import regex

from language_guesser.models import TrigramProfile

_SEPARATOR_RE = regex.compile(r"[\p{P}\p{S}\p{N}]+")
_WHITESPACE_RE = regex.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Remove combining marks, keeping base characters."""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return unicodedata.normalize("NFC", stripped)


def normalize(text: str) -> str:
    """Normalize text into the padded, lowercase form trigrams are cut from."""

    cleaned = _SEPARATOR_RE.sub(" ", strip_diacritics(text))
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip().lower()
    return f" {cleaned} "


def get_trigrams(text: str) -> list[str]:
    """Return every overlapping 3-character window of the normalized text."""

    if not text:
        return []
    normalized = normalize(text)
    if len(normalized) < 3:
        return []
    return [normalized[index : index + 3] for index in range(len(normalized) - 2)]


def as_tuples(text: str) -> TrigramProfile:
    """Count trigrams and sort them by ascending frequency."""

    counts = Counter(get_trigrams(text))
    return sorted(counts.items(), key=lambda item: item[1])
