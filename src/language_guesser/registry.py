"""Alpha-2/alpha-3 language registry."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from language_guesser.config import BUNDLED_LANGUAGES_PATH
from language_guesser.models import LanguageData
from language_guesser.ngrams import ModelDataError

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
_registry_cache: dict[Path, LanguageRegistry] = {}


class LanguageRegistry:
    """Lookup of language records by alpha-3 or alpha-2 code."""

    def __init__(self, languages: Iterable[LanguageData]) -> None:
        self._by_alpha3: dict[str, LanguageData] = {}
        self._by_alpha2: dict[str, LanguageData] = {}
        for language in languages:
            self._by_alpha3[language.alpha3] = language
            if language.alpha2:
                self._by_alpha2[language.alpha2] = language

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[str]]) -> LanguageRegistry:
        """Build from ``(alpha2, alpha3, name)`` triples."""

        languages: list[LanguageData] = []
        for row in rows:
            values = list(row)
            if len(values) != 3 or not all(isinstance(value, str) for value in values):
                raise ModelDataError(f"Expected [alpha2, alpha3, name] row, got {values!r}")
            alpha2, alpha3, name = values
            languages.append(LanguageData(alpha2=alpha2, alpha3=alpha3, name=name))
        return cls(languages)

    @classmethod
    def from_path(cls, path: Path) -> LanguageRegistry:
        try:
            rows = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as error:
            raise ModelDataError(f"Invalid language table in {path}: {error}") from error
        if not isinstance(rows, list):
            raise ModelDataError(f"Expected a list of languages in {path}")
        registry = cls.from_rows(rows)
        logger.info("Loaded language registry from %s: languages=%d", path, len(registry))
        return registry

    def __len__(self) -> int:
        return len(self._by_alpha3)

    def __contains__(self, alpha3: object) -> bool:
        return alpha3 in self._by_alpha3

    def by_alpha3(self, alpha3: str) -> LanguageData | None:
        return self._by_alpha3.get(alpha3)

    def by_alpha2(self, alpha2: str) -> LanguageData | None:
        return self._by_alpha2.get(alpha2)

    def to_alpha3(self, codes: Iterable[str]) -> tuple[str, ...]:
        """Normalize alpha-2 or alpha-3 codes to alpha-3, dropping unknown alpha-2 codes."""

        normalized: list[str] = []
        for code in codes:
            value = code.strip().lower()
            if len(value) == 3:
                normalized.append(value)
                continue
            language = self._by_alpha2.get(value)
            if language is None:
                logger.warning("Ignoring unknown language code %r", code)
                continue
            normalized.append(language.alpha3)
        return tuple(normalized)


def get_registry(path: Path = BUNDLED_LANGUAGES_PATH) -> LanguageRegistry:
    """Return the process-wide registry for ``path``, loading it on first use."""

    registry = _registry_cache.get(path)
    if registry is not None:
        return registry
    with _registry_lock:
        if path not in _registry_cache:
            _registry_cache[path] = LanguageRegistry.from_path(path)
        return _registry_cache[path]
