"""N-gram model tables: parsing, building from corpora, and the shared cache."""

from __future__ import annotations

import json
import logging
import threading
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from language_guesser.config import ModelSettings, Settings
from language_guesser.models import LanguageModel, ModelTable
from language_guesser.trigrams import get_trigrams

logger = logging.getLogger(__name__)

_models_lock = threading.Lock()
_models_cache: ModelTable | None = None


class ModelDataError(ValueError):
    """Raised when a model or registry table is malformed."""


def parse_ngram_value(value: str | Sequence[str]) -> tuple[str, ...]:
    """Parse a pipe-separated trigram string, or pass a sequence through.

    Parts are not trimmed: padding spaces are part of the trigram.
    """

    if isinstance(value, str):
        return tuple(part for part in value.split("|") if part)
    return tuple(value)


def build_model(
    language: str,
    script: str,
    corpus: str,
    *,
    max_trigrams: int = 300,
) -> LanguageModel:
    """Rank corpus trigrams by descending frequency, ties by first occurrence."""

    counts = Counter(get_trigrams(corpus))
    ranked = tuple(trigram for trigram, _ in counts.most_common(max_trigrams))
    return LanguageModel.from_trigrams(language, script, ranked)


def load_corpus_models(corpus_dir: Path, *, max_trigrams: int = 300) -> ModelTable:
    """Build models from ``<corpus_dir>/<script>/<alpha3>.txt`` reference texts."""

    if not corpus_dir.is_dir():
        raise ModelDataError(f"Corpus directory not found: {corpus_dir}")

    table: dict[str, dict[str, LanguageModel]] = {}
    for script_dir in sorted(path for path in corpus_dir.iterdir() if path.is_dir()):
        script_models: dict[str, LanguageModel] = {}
        for corpus_path in sorted(script_dir.glob("*.txt")):
            language = corpus_path.stem
            corpus = corpus_path.read_text(encoding="utf-8")
            script_models[language] = build_model(
                language,
                script_dir.name,
                corpus,
                max_trigrams=max_trigrams,
            )
        if script_models:
            table[script_dir.name] = script_models
    logger.info(
        "Built n-gram models from %s: scripts=%d languages=%d",
        corpus_dir,
        len(table),
        sum(len(models) for models in table.values()),
    )
    return table


def load_compiled_models(path: Path) -> ModelTable:
    """Load a ``{script: {language: "t1|t2|..."}}`` JSON document."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ModelDataError(f"Invalid n-gram JSON in {path}: {error}") from error
    if not isinstance(raw, dict):
        raise ModelDataError(f"Expected an object of scripts in {path}")

    table: dict[str, dict[str, LanguageModel]] = {}
    for script, languages in raw.items():
        if not isinstance(languages, dict):
            raise ModelDataError(f"Expected an object of languages for script {script!r}")
        script_models: dict[str, LanguageModel] = {}
        for language, value in languages.items():
            if not isinstance(value, (str, list)):
                raise ModelDataError(
                    f"Unsupported n-gram value for {script}/{language}: {type(value).__name__}",
                )
            script_models[language] = LanguageModel.from_trigrams(
                language,
                script,
                parse_ngram_value(value),
            )
        table[script] = script_models
    logger.info(
        "Loaded compiled n-gram models from %s: scripts=%d languages=%d",
        path,
        len(table),
        sum(len(models) for models in table.values()),
    )
    return table


def compile_models(table: ModelTable) -> dict[str, dict[str, str]]:
    """Serialize a model table into the compact pipe-separated form."""

    return {
        script: {language: "|".join(model.trigrams) for language, model in languages.items()}
        for script, languages in table.items()
    }


def dump_models(table: ModelTable, path: Path) -> None:
    """Write the compiled form of ``table`` to ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(compile_models(table), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def load_models(settings: ModelSettings) -> ModelTable:
    """Load the model table described by ``settings`` without caching."""

    if settings.ngrams_path is not None:
        return load_compiled_models(settings.ngrams_path)
    return load_corpus_models(settings.corpus_dir, max_trigrams=settings.max_trigrams)


def get_models(settings: ModelSettings | None = None) -> ModelTable:
    """Return the process-wide model table, building it on first use."""

    global _models_cache  # noqa: PLW0603
    if _models_cache is not None:
        return _models_cache
    with _models_lock:
        if _models_cache is None:
            _models_cache = load_models(settings or Settings.from_env().models)
        return _models_cache


def reset_models_cache() -> None:
    """Drop the cached table so the next ``get_models`` call rebuilds it."""

    global _models_cache  # noqa: PLW0603
    with _models_lock:
        _models_cache = None
