"""Segmentation and weighted aggregation for mixed-language text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import regex

from language_guesser.models import UNDETERMINED, Guess

_SENTENCE_BOUNDARY_RE = regex.compile(r"(?<=[.!?])\s+")


@dataclass(slots=True, frozen=True)
class SegmentationOptions:
    """How mixed text is cut into independently guessed segments."""

    window_size: int = 40
    step_size: int = 20
    min_segment_chars: int = 10
    candidates_per_segment: int = 3

    def __post_init__(self) -> None:
        if self.window_size <= 0:
            raise ValueError("window_size must be > 0.")
        if self.step_size <= 0:
            raise ValueError("step_size must be > 0.")
        if self.candidates_per_segment <= 0:
            raise ValueError("candidates_per_segment must be > 0.")


@dataclass(slots=True)
class _Accumulator:
    guess: Guess
    total_score: float = 0.0
    total_weight: float = 0.0


def segment_text(text: str, options: SegmentationOptions | None = None) -> list[str]:
    """Split on sentence boundaries, falling back to sliding windows for one long run."""

    options = options or SegmentationOptions()
    segments = [
        segment.strip()
        for segment in _SENTENCE_BOUNDARY_RE.split(text)
        if len(segment.strip()) >= options.min_segment_chars
    ]
    if not segments:
        return [text]
    if len(segments) == 1 and len(segments[0]) > options.window_size:
        return sliding_windows(segments[0], options.window_size, options.step_size)
    return segments


def sliding_windows(text: str, window_size: int, step_size: int) -> list[str]:
    """Overlapping windows; the last ones may be shorter than ``window_size``."""

    return [text[start : start + window_size] for start in range(0, len(text), step_size)]


def aggregate_guesses(
    segments: list[str],
    guess_segment: Callable[[str, int], list[Guess]],
    *,
    limit: int = 3,
    candidates_per_segment: int = 3,
) -> list[Guess]:
    """Average per-segment guesses weighted by segment length, best first.

    Segments that come back undetermined (too short, unknown script) do not
    contribute; ``und`` is returned only when no segment yields a language.
    """

    aggregated: dict[str, _Accumulator] = {}
    for segment in segments:
        weight = len(segment)
        for guess in guess_segment(segment, candidates_per_segment):
            if guess.alpha3 == UNDETERMINED:
                continue
            entry = aggregated.setdefault(guess.alpha3, _Accumulator(guess=guess))
            entry.total_score += guess.score * weight
            entry.total_weight += weight

    results = [
        Guess(
            alpha3=entry.guess.alpha3,
            alpha2=entry.guess.alpha2,
            language=entry.guess.language,
            score=entry.total_score / entry.total_weight if entry.total_weight else 0.0,
        )
        for entry in aggregated.values()
    ]
    results.sort(key=lambda item: item.score, reverse=True)
    return results[:limit] or [Guess.undetermined()]
