"""Controllers for language-guesser CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from language_guesser.config import Settings
from language_guesser.guesser import LanguageGuesser
from language_guesser.mixed import SegmentationOptions
from language_guesser.models import Guess
from language_guesser.ngrams import dump_models, load_corpus_models
from language_guesser.scripts import get_top_script


@dataclass(slots=True)
class GuessCommand:
    """CLI inputs for the ranked guess command."""

    text: str
    allow_list: tuple[str, ...]
    deny_list: tuple[str, ...]
    limit: int
    as_json: bool = False


@dataclass(slots=True)
class BestGuessCommand:
    """CLI inputs for the best guess command."""

    text: str
    allow_list: tuple[str, ...]
    as_json: bool = False


@dataclass(slots=True)
class MixedGuessCommand:
    """CLI inputs for mixed-language guessing."""

    text: str
    allow_list: tuple[str, ...]
    limit: int
    window_size: int
    step_size: int
    as_json: bool = False


@dataclass(slots=True)
class BuildModelsCommand:
    """CLI inputs for compiling reference corpora into an n-gram table."""

    output: Path
    corpus_dir: Path | None
    max_trigrams: int | None


class GuesserCliController:
    """Coordinates guesser command execution."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._guesser: LanguageGuesser | None = None

    def _get_guesser(self) -> LanguageGuesser:
        if self._guesser is None:
            settings = self._settings or Settings.from_env()
            settings.validate()
            self._guesser = LanguageGuesser(settings)
        return self._guesser

    def guess(self, command: GuessCommand) -> list[str]:
        guesses = self._get_guesser().guess(
            command.text,
            command.allow_list,
            command.limit,
            command.deny_list,
        )
        return _render_guesses(guesses, as_json=command.as_json)

    def best(self, command: BestGuessCommand) -> list[str]:
        guess = self._get_guesser().guess_best(command.text, command.allow_list)
        return _render_guesses([guess], as_json=command.as_json)

    def mixed(self, command: MixedGuessCommand) -> list[str]:
        guesses = self._get_guesser().guess_mixed(
            command.text,
            command.allow_list,
            command.limit,
            SegmentationOptions(window_size=command.window_size, step_size=command.step_size),
        )
        return _render_guesses(guesses, as_json=command.as_json)

    def script(self, text: str) -> list[str]:
        script_id, occurrence = get_top_script(text)
        return [f"script={script_id} occurrence={occurrence:.3f}"]

    def build_models(self, command: BuildModelsCommand) -> list[str]:
        settings = self._settings or Settings.from_env()
        corpus_dir = command.corpus_dir or settings.models.corpus_dir
        max_trigrams = command.max_trigrams or settings.models.max_trigrams
        table = load_corpus_models(corpus_dir, max_trigrams=max_trigrams)
        dump_models(table, command.output)
        lines = [f"N-gram models written: path={command.output}"]
        for script, languages in table.items():
            lines.append(f"  {script}: {', '.join(languages)}")
        return lines


def _render_guesses(guesses: list[Guess], *, as_json: bool) -> list[str]:
    if as_json:
        return [json.dumps([guess.as_dict() for guess in guesses], ensure_ascii=False)]
    return [
        f"{guess.alpha3}\t{guess.alpha2 or '-'}\t{guess.score:.4f}\t{guess.language}"
        for guess in guesses
    ]
