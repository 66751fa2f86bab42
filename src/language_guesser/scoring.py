"""Trigram distance scoring and allow/deny filtering of candidate languages."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TypeVar

from language_guesser.config import ScoringSettings
from language_guesser.models import Candidate, DetectionSettings, LanguageModel, TrigramProfile

_DEFAULT_SCORING = ScoringSettings()

T = TypeVar("T")


def get_distance(
    profile: TrigramProfile,
    model: LanguageModel,
    *,
    scoring: ScoringSettings | None = None,
) -> float:
    """Distance between a text profile and a language model; lower is closer."""

    scoring = scoring or _DEFAULT_SCORING
    ranks = model.ranks
    distance = 0.0
    for trigram, count in profile:
        rank = ranks.get(trigram)
        if rank is None:
            distance += scoring.oov_penalty
        else:
            distance += abs(count - rank) * scoring.rank_scale
    return distance


def filter_languages(
    languages: Mapping[str, T],
    allow_list: Collection[str],
    deny_list: Collection[str],
) -> Mapping[str, T]:
    """Restrict candidate languages; a denied language is dropped even if allowed."""

    if not allow_list and not deny_list:
        return languages
    return {
        language: value
        for language, value in languages.items()
        if (not allow_list or language in allow_list) and language not in deny_list
    }


def get_distances(
    profile: TrigramProfile,
    languages: Mapping[str, LanguageModel],
    settings: DetectionSettings | None = None,
    *,
    scoring: ScoringSettings | None = None,
) -> list[Candidate]:
    """Return ``(language, distance)`` pairs, closest first."""

    settings = settings or DetectionSettings()
    filtered = filter_languages(languages, settings.allow_list, settings.deny_list)
    distances = [
        (language, get_distance(profile, model, scoring=scoring))
        for language, model in filtered.items()
    ]
    distances.sort(key=lambda item: item[1])
    return distances
