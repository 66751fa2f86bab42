"""Runtime configuration for detection, scoring, and model loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

BUNDLED_DATA_DIR = Path(__file__).parent / "data"
BUNDLED_CORPUS_DIR = BUNDLED_DATA_DIR / "corpus"
BUNDLED_LANGUAGES_PATH = BUNDLED_DATA_DIR / "languages.json"


@dataclass(slots=True)
class DetectionDefaults:
    """Defaults applied when a caller does not pass explicit detection settings."""

    min_length: int = 10


@dataclass(slots=True)
class ScoringSettings:
    """Tunable constants of the trigram distance and confidence gates."""

    oov_penalty: float = 300.0
    rank_scale: float = 0.5
    confidence_floor: float = 0.5
    script_dominance: float = 0.5
    max_chars: int = 2048


@dataclass(slots=True)
class ModelSettings:
    """Where n-gram models and the language registry come from."""

    ngrams_path: Path | None = None
    corpus_dir: Path = BUNDLED_CORPUS_DIR
    languages_path: Path = BUNDLED_LANGUAGES_PATH
    max_trigrams: int = 300


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    detection: DetectionDefaults = field(default_factory=DetectionDefaults)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    models: ModelSettings = field(default_factory=ModelSettings)

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment, falling back to bundled defaults."""

        ngrams_path = os.getenv("LANGUAGE_GUESSER_NGRAMS_PATH", "").strip()
        return cls(
            detection=DetectionDefaults(
                min_length=int(os.getenv("LANGUAGE_GUESSER_MIN_LENGTH", "10")),
            ),
            scoring=ScoringSettings(
                oov_penalty=float(os.getenv("LANGUAGE_GUESSER_OOV_PENALTY", "300")),
                rank_scale=float(os.getenv("LANGUAGE_GUESSER_RANK_SCALE", "0.5")),
                confidence_floor=float(os.getenv("LANGUAGE_GUESSER_CONFIDENCE_FLOOR", "0.5")),
                script_dominance=float(os.getenv("LANGUAGE_GUESSER_SCRIPT_DOMINANCE", "0.5")),
                max_chars=int(os.getenv("LANGUAGE_GUESSER_MAX_CHARS", "2048")),
            ),
            models=ModelSettings(
                ngrams_path=Path(ngrams_path) if ngrams_path else None,
                corpus_dir=Path(
                    os.getenv("LANGUAGE_GUESSER_CORPUS_DIR", str(BUNDLED_CORPUS_DIR)),
                ),
                languages_path=Path(
                    os.getenv("LANGUAGE_GUESSER_LANGUAGES_PATH", str(BUNDLED_LANGUAGES_PATH)),
                ),
                max_trigrams=int(os.getenv("LANGUAGE_GUESSER_MAX_TRIGRAMS", "300")),
            ),
        )

    def validate(self) -> None:
        """Raise configuration error if any value is out of range."""

        if self.detection.min_length < 0:
            raise ValueError("LANGUAGE_GUESSER_MIN_LENGTH must be >= 0.")
        if self.scoring.oov_penalty <= 0:
            raise ValueError("LANGUAGE_GUESSER_OOV_PENALTY must be > 0.")
        if self.scoring.rank_scale < 0:
            raise ValueError("LANGUAGE_GUESSER_RANK_SCALE must be >= 0.")
        for name, value in (
            ("LANGUAGE_GUESSER_CONFIDENCE_FLOOR", self.scoring.confidence_floor),
            ("LANGUAGE_GUESSER_SCRIPT_DOMINANCE", self.scoring.script_dominance),
        ):
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be within [0, 1], got {value!r}.")
        if self.scoring.max_chars <= 0:
            raise ValueError("LANGUAGE_GUESSER_MAX_CHARS must be > 0.")
        if self.models.max_trigrams <= 0:
            raise ValueError("LANGUAGE_GUESSER_MAX_TRIGRAMS must be > 0.")
        if self.models.ngrams_path is not None and not self.models.ngrams_path.is_file():
            raise ValueError(
                f"LANGUAGE_GUESSER_NGRAMS_PATH does not point to a file: {self.models.ngrams_path}",
            )
