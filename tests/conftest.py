"""Shared test fixtures."""

from __future__ import annotations

import pytest

from language_guesser.guesser import LanguageGuesser
from language_guesser.models import LanguageModel
from language_guesser.ngrams import build_model


@pytest.fixture(scope="session")
def guesser() -> LanguageGuesser:
    return LanguageGuesser()


@pytest.fixture()
def toy_models() -> dict[str, dict[str, LanguageModel]]:
    """Small Latin-only table built from a few sentences per language."""

    corpora = {
        "eng": "the cat is on the table and the dog is in the garden with the children",
        "spa": "el gato esta en la mesa y el perro esta en el jardin con los ninos",
        "fra": "le chat est sur la table et le chien est dans le jardin avec les enfants",
    }
    return {
        "Latin": {
            language: build_model(language, "Latin", corpus)
            for language, corpus in corpora.items()
        },
    }
