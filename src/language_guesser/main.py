"""CLI entrypoint for language-guesser."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import rich_click as click

from language_guesser import __version__
from language_guesser.controllers import (
    BestGuessCommand,
    BuildModelsCommand,
    GuessCommand,
    GuesserCliController,
    MixedGuessCommand,
)
from language_guesser.ngrams import ModelDataError

click.rich_click.USE_MARKDOWN = True
GUESSER_CONTROLLER = GuesserCliController()

_allow_option = click.option(
    "--allow",
    "allow_list",
    multiple=True,
    help="Allowed language code (alpha-2 or alpha-3). Can be repeated.",
)
_json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print results as JSON.",
)


@click.group()
@click.version_option(version=__version__, prog_name="language-guesser")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def language_guesser(log_level: str) -> None:
    """Trigram-based language guesser CLI."""

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@language_guesser.command("guess")
@click.argument("text")
@_allow_option
@click.option(
    "--deny",
    "deny_list",
    multiple=True,
    help="Excluded language code (alpha-2 or alpha-3). Can be repeated.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Max number of guesses to print.",
)
@_json_option
def guess(
    text: str,
    allow_list: tuple[str, ...],
    deny_list: tuple[str, ...],
    limit: int,
    as_json: bool,
) -> None:
    """Print ranked language guesses for TEXT (use `-` to read stdin)."""

    _run(
        lambda: GUESSER_CONTROLLER.guess(
            GuessCommand(
                text=_read_text(text),
                allow_list=allow_list,
                deny_list=deny_list,
                limit=limit,
                as_json=as_json,
            ),
        ),
    )


@language_guesser.command("best")
@click.argument("text")
@_allow_option
@_json_option
def best(text: str, allow_list: tuple[str, ...], as_json: bool) -> None:
    """Print the single best language guess for TEXT."""

    _run(
        lambda: GUESSER_CONTROLLER.best(
            BestGuessCommand(text=_read_text(text), allow_list=allow_list, as_json=as_json),
        ),
    )


@language_guesser.command("mixed")
@click.argument("text")
@_allow_option
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Max number of guesses to print.",
)
@click.option(
    "--window-size",
    type=click.IntRange(min=1),
    default=40,
    show_default=True,
    help="Sliding window size for unpunctuated text.",
)
@click.option(
    "--step-size",
    type=click.IntRange(min=1),
    default=20,
    show_default=True,
    help="Sliding window step.",
)
@_json_option
def mixed(  # noqa: PLR0913
    text: str,
    allow_list: tuple[str, ...],
    limit: int,
    window_size: int,
    step_size: int,
    as_json: bool,
) -> None:
    """Print aggregated guesses for TEXT that may mix several languages."""

    _run(
        lambda: GUESSER_CONTROLLER.mixed(
            MixedGuessCommand(
                text=_read_text(text),
                allow_list=allow_list,
                limit=limit,
                window_size=window_size,
                step_size=step_size,
                as_json=as_json,
            ),
        ),
    )


@language_guesser.command("script")
@click.argument("text")
def script(text: str) -> None:
    """Print the dominant script of TEXT and its occurrence ratio."""

    _run(lambda: GUESSER_CONTROLLER.script(_read_text(text)))


@language_guesser.command("build-models")
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    required=True,
    help="Destination JSON file.",
)
@click.option(
    "--corpus-dir",
    type=click.Path(path_type=Path, file_okay=False, exists=True),
    default=None,
    help="Corpus root with <script>/<alpha3>.txt files. Defaults to the bundled corpora.",
)
@click.option(
    "--max-trigrams",
    type=click.IntRange(min=1),
    default=None,
    help="Trigrams kept per language model.",
)
def build_models(output: Path, corpus_dir: Path | None, max_trigrams: int | None) -> None:
    """Compile reference corpora into a pipe-separated n-gram JSON table."""

    _run(
        lambda: GUESSER_CONTROLLER.build_models(
            BuildModelsCommand(output=output, corpus_dir=corpus_dir, max_trigrams=max_trigrams),
        ),
    )


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read()
    return text


def _run(action: Callable[[], list[str]]) -> None:
    try:
        lines = action()
    except ModelDataError as error:
        raise click.ClickException(f"Model data error: {error}") from error
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    language_guesser()
