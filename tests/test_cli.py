import json
from pathlib import Path

import allure
from click.testing import CliRunner

from language_guesser import __version__
from language_guesser.main import language_guesser

pytestmark = [
    allure.epic("Public API"),
    allure.feature("Command Line"),
]


def test_cli_version() -> None:
    result = CliRunner().invoke(language_guesser, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_guess_prints_ranked_lines() -> None:
    result = CliRunner().invoke(
        language_guesser,
        ["guess", "This is a sample sentence written in English.", "--limit", "2"],
    )

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("eng\ten\t1.0000\tEnglish")


def test_cli_best_json_with_allow_list() -> None:
    result = CliRunner().invoke(
        language_guesser,
        [
            "best",
            "Esta es una oración de ejemplo en español.",
            "--allow",
            "es",
            "--allow",
            "eng",
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload[0]["alpha3"] == "spa"
    assert payload[0]["language"] == "Spanish"


def test_cli_guess_reads_stdin() -> None:
    result = CliRunner().invoke(
        language_guesser,
        ["guess", "-", "--json"],
        input="Le gouvernement a annoncé une nouvelle loi pour les familles.",
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["alpha3"] == "fra"


def test_cli_mixed() -> None:
    result = CliRunner().invoke(
        language_guesser,
        [
            "mixed",
            "Este é um exemplo de frase em Português com um little bit of English embedded.",
            "--allow",
            "por",
            "--allow",
            "eng",
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    codes = {item["alpha3"] for item in json.loads(result.output)}
    assert codes == {"por", "eng"}


def test_cli_script() -> None:
    result = CliRunner().invoke(language_guesser, ["script", "你好世界"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "script=cmn occurrence=1.000"


def test_cli_build_models_writes_compiled_table(tmp_path: Path) -> None:
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "Latin").mkdir(parents=True)
    (corpus_dir / "Latin" / "eng.txt").write_text("the cat and the hat", encoding="utf-8")
    output = tmp_path / "out" / "ngrams.json"

    result = CliRunner().invoke(
        language_guesser,
        ["build-models", "--output", str(output), "--corpus-dir", str(corpus_dir)],
    )

    assert result.exit_code == 0, result.output
    assert "Latin: eng" in result.output
    compiled = json.loads(output.read_text(encoding="utf-8"))
    assert compiled["Latin"]["eng"].split("|")[0] == " th"


def test_cli_build_models_empty_corpus_writes_empty_table(tmp_path: Path) -> None:
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    output = tmp_path / "ngrams.json"

    result = CliRunner().invoke(
        language_guesser,
        ["build-models", "--output", str(output), "--corpus-dir", str(corpus_dir)],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text(encoding="utf-8")) == {}
