"""Single-text detection: script classification followed by trigram scoring."""

from __future__ import annotations

import logging
import math

from language_guesser.config import ScoringSettings
from language_guesser.models import UNDETERMINED, Candidate, DetectionSettings, ModelTable
from language_guesser.ngrams import get_models
from language_guesser.scoring import get_distances
from language_guesser.scripts import get_top_script
from language_guesser.trigrams import as_tuples

logger = logging.getLogger(__name__)

_DEFAULT_SCORING = ScoringSettings()


def _undetermined() -> list[Candidate]:
    return [(UNDETERMINED, 1.0)]


def detect_all(
    text: str,
    settings: DetectionSettings | None = None,
    *,
    models: ModelTable | None = None,
    scoring: ScoringSettings | None = None,
) -> list[Candidate]:
    """Rank candidate languages (or a script id) for ``text``, best first.

    Scores approximate confidence in ``[0, 1]``. Inconclusive input yields
    ``[("und", 1.0)]``.
    """

    settings = settings or DetectionSettings()
    scoring = scoring or _DEFAULT_SCORING
    if not text or len(text) < settings.min_length:
        return _undetermined()

    value = text[: scoring.max_chars]
    script_id, occurrence = get_top_script(value)
    table = get_models() if models is None else models
    script_models = table.get(script_id)

    if script_models is None:
        if occurrence > scoring.script_dominance:
            return _resolve_modelless_script(script_id, settings.allow_list)
        logger.debug("No dominant script (top=%s ratio=%.3f)", script_id, occurrence)
        return _undetermined()

    distances = get_distances(as_tuples(value), script_models, settings, scoring=scoring)
    if not distances:
        logger.debug("All %s candidates filtered out", script_id)
        return _undetermined()
    if distances[0][0] == UNDETERMINED:
        return [(script_id, 1.0)]

    scores = _normalize_scores(distances, len(value), scoring.oov_penalty)
    if scores[0][1] < scoring.confidence_floor:
        logger.debug("Best score %.3f below confidence floor", scores[0][1])
        return _undetermined()
    return scores


def _resolve_modelless_script(script_id: str, allow_list: tuple[str, ...]) -> list[Candidate]:
    if not allow_list:
        return [(script_id, 1.0)]
    if script_id in allow_list:
        return [(script_id, 1.0)]
    # Han is shared by Chinese and Japanese writing.
    if script_id == "cmn" and "jpn" in allow_list:
        return [("jpn", 1.0)]
    return _undetermined()


def _normalize_scores(
    distances: list[Candidate],
    text_length: int,
    oov_penalty: float,
) -> list[Candidate]:
    min_distance = distances[0][1]
    denominator = max(1.0, text_length * oov_penalty - min_distance)
    scores: list[Candidate] = []
    for language, distance in distances:
        score = 1 - (distance - min_distance) / denominator
        scores.append((language, score if math.isfinite(score) else 0.0))
    scores.sort(key=lambda item: item[1], reverse=True)
    return scores
