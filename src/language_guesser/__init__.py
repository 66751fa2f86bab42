"""Trigram-based language guessing."""

from language_guesser.detector import detect_all
from language_guesser.guesser import LanguageGuesser
from language_guesser.models import DetectionSettings, Guess, LanguageData
from language_guesser.scoring import filter_languages, get_distance, get_distances
from language_guesser.scripts import get_occurrence, get_top_script, is_latin
from language_guesser.trigrams import as_tuples, get_trigrams

__version__ = "1.0.1"

__all__ = [
    "DetectionSettings",
    "Guess",
    "LanguageData",
    "LanguageGuesser",
    "__version__",
    "as_tuples",
    "detect_all",
    "filter_languages",
    "get_distance",
    "get_distances",
    "get_occurrence",
    "get_top_script",
    "get_trigrams",
    "is_latin",
]
