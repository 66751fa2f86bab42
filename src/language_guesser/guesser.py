"""Public facade mapping detection results onto registry languages."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from language_guesser.config import ModelSettings, Settings
from language_guesser.detector import detect_all
from language_guesser.mixed import SegmentationOptions, aggregate_guesses, segment_text
from language_guesser.models import Candidate, DetectionSettings, Guess, ModelTable
from language_guesser.ngrams import get_models, load_models
from language_guesser.registry import LanguageRegistry, get_registry

logger = logging.getLogger(__name__)


class LanguageGuesser:
    """Guess the language of short texts using script detection and trigram models.

    Model tables and the registry are shared read-only state; one instance can
    serve concurrent callers.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        models: ModelTable | None = None,
        registry: LanguageRegistry | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings.from_env()
        self._models = models if models is not None else self._load_models(self._settings)
        self._registry = (
            registry
            if registry is not None
            else get_registry(self._settings.models.languages_path)
        )

    @staticmethod
    def _load_models(settings: Settings) -> ModelTable:
        if settings.models == ModelSettings():
            return get_models(settings.models)
        return load_models(settings.models)

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    @property
    def models(self) -> ModelTable:
        return self._models

    def detect_all(
        self,
        text: str,
        settings: DetectionSettings | None = None,
    ) -> list[Candidate]:
        """Raw ``(language_or_script, score)`` candidates for ``text``."""

        return detect_all(text, settings, models=self._models, scoring=self._settings.scoring)

    def guess(
        self,
        text: str,
        allow_list: Iterable[str] = (),
        limit: int = 3,
        deny_list: Iterable[str] = (),
    ) -> list[Guess]:
        """Return up to ``limit`` guesses, best first; never empty."""

        settings = DetectionSettings(
            min_length=self._settings.detection.min_length,
            allow_list=self._registry.to_alpha3(allow_list),
            deny_list=self._registry.to_alpha3(deny_list),
        )
        results: list[Guess] = []
        for code, score in self.detect_all(text or "", settings):
            language = self._registry.by_alpha3(code)
            if language is None:
                logger.debug("Dropping candidate %r without registry entry", code)
                continue
            results.append(Guess.from_language(language, score))

        return results[:limit] or [Guess.undetermined()]

    def guess_best(self, text: str, allow_list: Iterable[str] = ()) -> Guess:
        """Return the single most likely language."""

        return self.guess(text, allow_list, limit=1)[0]

    def guess_mixed(
        self,
        text: str,
        allow_list: Iterable[str] = (),
        limit: int = 3,
        options: SegmentationOptions | None = None,
    ) -> list[Guess]:
        """Guess languages of text that may mix several languages."""

        options = options or SegmentationOptions()
        allowed = tuple(allow_list)
        segments = segment_text(text or "", options)
        logger.debug("Mixed text split into %d segments", len(segments))
        return aggregate_guesses(
            segments,
            lambda segment, candidates: self.guess(segment, allowed, candidates),
            limit=limit,
            candidates_per_segment=options.candidates_per_segment,
        )
