"""Dominant writing-system detection based on Unicode script properties."""

from __future__ import annotations

from dataclasses import dataclass

import regex

from language_guesser.models import UNDETERMINED


@dataclass(slots=True, frozen=True)
class ScriptPattern:
    """Script identifier paired with a matcher over its code points."""

    script_id: str
    pattern: regex.Pattern[str]


def _script(script_id: str, expression: str) -> ScriptPattern:
    return ScriptPattern(script_id=script_id, pattern=regex.compile(expression))


# Ids that name a language are scripts used by exactly one language.
SCRIPTS: tuple[ScriptPattern, ...] = (
    _script("cmn", r"\p{Script=Han}"),
    _script("Latin", r"\p{Script=Latin}"),
    _script("Cyrillic", r"\p{Script=Cyrillic}"),
    _script("Arabic", r"\p{Script=Arabic}"),
    _script("ben", r"\p{Script=Bengali}"),
    _script("Devanagari", r"\p{Script=Devanagari}"),
    # Kana only, Han is covered by cmn.
    _script("jpn", r"[\p{Script=Hiragana}\p{Script=Katakana}]"),
    _script("kor", r"\p{Script=Hangul}"),
    _script("tel", r"\p{Script=Telugu}"),
    _script("tam", r"\p{Script=Tamil}"),
    _script("guj", r"\p{Script=Gujarati}"),
    _script("kan", r"\p{Script=Kannada}"),
    _script("mal", r"\p{Script=Malayalam}"),
    _script("Myanmar", r"\p{Script=Myanmar}"),
    _script("ori", r"\p{Script=Oriya}"),
    _script("pan", r"\p{Script=Gurmukhi}"),
    _script("Ethiopic", r"\p{Script=Ethiopic}"),
    _script("tha", r"\p{Script=Thai}"),
    _script("sin", r"\p{Script=Sinhala}"),
    _script("ell", r"\p{Script=Greek}"),
    _script("khm", r"\p{Script=Khmer}"),
    _script("hye", r"\p{Script=Armenian}"),
    _script("sat", r"\p{Script=Ol_Chiki}"),
    _script("bod", r"\p{Script=Tibetan}"),
    _script("Hebrew", r"\p{Script=Hebrew}"),
    _script("kat", r"\p{Script=Georgian}"),
    _script("lao", r"\p{Script=Lao}"),
    _script("zgh", r"\p{Script=Tifinagh}"),
    _script("iii", r"\p{Script=Yi}"),
    _script("aii", r"\p{Script=Avestan}"),
)

SCRIPTS_BY_ID = {script.script_id: script for script in SCRIPTS}

_LATIN_RE = SCRIPTS_BY_ID["Latin"].pattern
_LETTER_RE = regex.compile(r"\p{L}")


def get_occurrence(text: str, pattern: regex.Pattern[str]) -> float:
    """Share of characters in ``text`` matched by ``pattern``."""

    if not text:
        return 0.0
    return len(pattern.findall(text)) / len(text)


def is_latin(text: str) -> bool:
    """Return True when Latin letters are the majority of all letters."""

    letters = len(_LETTER_RE.findall(text))
    latin = len(_LATIN_RE.findall(text))
    return latin > letters / 2


def get_top_script(text: str) -> tuple[str, float]:
    """Return the script with the highest occurrence ratio and that ratio."""

    if len(text) < 3:
        return UNDETERMINED, 1.0
    if is_latin(text):
        return "Latin", 1.0

    top_script = ""
    top_ratio = -1.0
    for script in SCRIPTS:
        ratio = get_occurrence(text, script.pattern)
        if ratio > top_ratio:
            top_script = script.script_id
            top_ratio = ratio
            if top_ratio == 1:
                break
    return top_script, top_ratio
