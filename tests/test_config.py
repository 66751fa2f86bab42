from pathlib import Path

import allure
import pytest

from language_guesser.config import (
    BUNDLED_CORPUS_DIR,
    DetectionDefaults,
    ModelSettings,
    ScoringSettings,
    Settings,
)

pytestmark = [
    allure.epic("Configuration"),
    allure.feature("Settings"),
]


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LANGUAGE_GUESSER_MIN_LENGTH",
        "LANGUAGE_GUESSER_OOV_PENALTY",
        "LANGUAGE_GUESSER_NGRAMS_PATH",
        "LANGUAGE_GUESSER_CORPUS_DIR",
        "LANGUAGE_GUESSER_MAX_TRIGRAMS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.detection.min_length == 10
    assert settings.scoring.oov_penalty == 300
    assert settings.scoring.max_chars == 2048
    assert settings.models.ngrams_path is None
    assert settings.models.corpus_dir == BUNDLED_CORPUS_DIR
    assert settings.models == ModelSettings()


def test_from_env_parses_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    ngrams_path = tmp_path / "ngrams.json"
    monkeypatch.setenv("LANGUAGE_GUESSER_MIN_LENGTH", "5")
    monkeypatch.setenv("LANGUAGE_GUESSER_OOV_PENALTY", "250")
    monkeypatch.setenv("LANGUAGE_GUESSER_RANK_SCALE", "1")
    monkeypatch.setenv("LANGUAGE_GUESSER_CONFIDENCE_FLOOR", "0.7")
    monkeypatch.setenv("LANGUAGE_GUESSER_NGRAMS_PATH", str(ngrams_path))
    monkeypatch.setenv("LANGUAGE_GUESSER_MAX_TRIGRAMS", "400")

    settings = Settings.from_env()

    assert settings.detection.min_length == 5
    assert settings.scoring.oov_penalty == 250
    assert settings.scoring.rank_scale == 1
    assert settings.scoring.confidence_floor == 0.7
    assert settings.models.ngrams_path == ngrams_path
    assert settings.models.max_trigrams == 400


def test_validate_accepts_defaults() -> None:
    Settings().validate()


@pytest.mark.parametrize(
    ("settings", "message"),
    [
        (Settings(detection=DetectionDefaults(min_length=-1)), "MIN_LENGTH"),
        (Settings(scoring=ScoringSettings(oov_penalty=0)), "OOV_PENALTY"),
        (Settings(scoring=ScoringSettings(confidence_floor=1.5)), "CONFIDENCE_FLOOR"),
        (Settings(scoring=ScoringSettings(script_dominance=-0.1)), "SCRIPT_DOMINANCE"),
        (Settings(scoring=ScoringSettings(max_chars=0)), "MAX_CHARS"),
        (Settings(models=ModelSettings(max_trigrams=0)), "MAX_TRIGRAMS"),
    ],
)
def test_validate_rejects_out_of_range_values(settings: Settings, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        settings.validate()


def test_validate_rejects_missing_ngrams_file(tmp_path: Path) -> None:
    settings = Settings(models=ModelSettings(ngrams_path=tmp_path / "missing.json"))

    with pytest.raises(ValueError, match="NGRAMS_PATH"):
        settings.validate()
