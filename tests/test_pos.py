"""Tests for part-of-speech abbreviation (pos.py)."""

import pytest

from wordna.pos import abbreviate_part_of_speech


@pytest.mark.parametrize("text, expected", [
    ("noun", "n"),
    ("Verbs", "v"),
    (" Adjective ", "adj"),
    ("adv", "adv"),
    ("preposition", "prep"),
    ("interjection", "interj"),
])
def test_exact_names(text, expected):
    assert abbreviate_part_of_speech(text) == expected


def test_contained_name():
    assert abbreviate_part_of_speech("transitive verb") == "v"
    assert abbreviate_part_of_speech("noun phrase") == "n"


def test_unknown_returned_unchanged():
    assert abbreviate_part_of_speech("Gerund") == "Gerund"


def test_empty():
    assert abbreviate_part_of_speech("") == ""
    assert abbreviate_part_of_speech("   ") == "   "
