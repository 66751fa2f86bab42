"""Domain models for script classification, scoring, and guessing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

UNDETERMINED = "und"

Candidate = tuple[str, float]
TrigramProfile = list[tuple[str, int]]


@dataclass(slots=True, frozen=True)
class LanguageData:
    """Registry record for one supported language."""

    alpha2: str
    alpha3: str
    name: str


@dataclass(slots=True, frozen=True)
class LanguageModel:
    """Ranked trigram fingerprint of one language.

    ``trigrams`` is ordered by descending corpus frequency, so the position of a
    trigram is its rank. ``ranks`` is the precomputed reverse lookup.
    """

    language: str
    script: str
    trigrams: tuple[str, ...]
    ranks: Mapping[str, int] = field(repr=False, compare=False)

    @classmethod
    def from_trigrams(cls, language: str, script: str, trigrams: tuple[str, ...]) -> LanguageModel:
        ranks: dict[str, int] = {}
        for rank, trigram in enumerate(trigrams):
            ranks.setdefault(trigram, rank)
        return cls(
            language=language,
            script=script,
            trigrams=trigrams,
            ranks=MappingProxyType(ranks),
        )

    def __contains__(self, trigram: object) -> bool:
        return trigram in self.ranks

    def __len__(self) -> int:
        return len(self.trigrams)


ScriptModels = Mapping[str, LanguageModel]
ModelTable = Mapping[str, ScriptModels]


@dataclass(slots=True, frozen=True)
class DetectionSettings:
    """Per-call detection options.

    Allow and deny lists hold alpha-3 codes; an empty tuple means no restriction.
    """

    min_length: int = 10
    allow_list: tuple[str, ...] = ()
    deny_list: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class Guess:
    """Language guess exposed by the public API."""

    alpha3: str
    alpha2: str
    language: str
    score: float

    @classmethod
    def undetermined(cls) -> Guess:
        return cls(alpha3=UNDETERMINED, alpha2="", language="Undetermined", score=0.0)

    @classmethod
    def from_language(cls, language: LanguageData, score: float) -> Guess:
        return cls(
            alpha3=language.alpha3,
            alpha2=language.alpha2,
            language=language.name,
            score=score,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "alpha3": self.alpha3,
            "alpha2": self.alpha2,
            "language": self.language,
            "score": self.score,
        }
