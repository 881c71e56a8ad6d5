"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from wordna.vocabulary import AffixVocabulary


def write_json(path: Path, data) -> Path:
    """Write data as JSON and return the path."""
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def small_vocab() -> AffixVocabulary:
    """A hand-sized vocabulary so segmentation results are predictable."""
    return AffixVocabulary(
        prefixes={"un": "not", "re": "again", "dis": "apart", "in": "not, into"},
        suffixes={
            "ful": "full of", "ness": "state", "ation": "action",
            "tion": "action", "ion": "action", "ly": "manner",
            "er": "one who", "in": "chemical compound",
        },
    )


@pytest.fixture
def empty_vocab() -> AffixVocabulary:
    return AffixVocabulary()


@pytest.fixture(scope="session")
def default_vocab() -> AffixVocabulary:
    """The vocabulary shipped in wordna/data/affixes.json."""
    return AffixVocabulary.default()


@pytest.fixture
def help_payload() -> dict:
    """A service payload for the root 'help', in the service's camelCase."""
    return {
        "isRoot": True,
        "rootWord": "help",
        "rootInfo": {
            "partOfSpeech": "verb",
            "phonetic": "/help/",
            "meaning": "to assist",
            "commonPhrases": ["help out", "help yourself"],
        },
        "derivedWords": [
            {
                "word": "unhelpful",
                "prefixes": ["un-"],
                "suffixes": ["-ful"],
                "partOfSpeech": "adjective",
                "phonetic": "/ʌnˈhelpfəl/",
                "meaning": "not helpful",
            },
            {
                "word": "helper",
                "prefixes": [],
                "suffixes": ["er"],
                "partOfSpeech": "noun",
                "phonetic": "/ˈhelpər/",
                "meaning": "one who helps",
            },
        ],
    }
