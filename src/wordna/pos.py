"""Part-of-speech abbreviations for compact display ("adjective" -> "adj")."""

from __future__ import annotations

# English POS names (and common variants) -> short labels
_POS_ABBREVIATIONS: dict[str, str] = {
    "noun": "n",
    "nouns": "n",
    "verb": "v",
    "verbs": "v",
    "adjective": "adj",
    "adjectives": "adj",
    "adj": "adj",
    "adverb": "adv",
    "adverbs": "adv",
    "adv": "adv",
    "pronoun": "pron",
    "pronouns": "pron",
    "pron": "pron",
    "preposition": "prep",
    "prepositions": "prep",
    "prep": "prep",
    "conjunction": "conj",
    "conjunctions": "conj",
    "conj": "conj",
    "interjection": "interj",
    "interjections": "interj",
    "interj": "interj",
    "numeral": "num",
    "numerals": "num",
    "num": "num",
    "article": "art",
    "articles": "art",
    "art": "art",
}


def abbreviate_part_of_speech(part_of_speech: str) -> str:
    """Short label for a part of speech, or the input unchanged if unknown.

    Tries an exact match first, then the first known name that contains
    the text or is contained in it ("transitive verb" -> "v").
    """
    if not part_of_speech:
        return part_of_speech

    normalized = part_of_speech.strip().lower()
    if not normalized:
        return part_of_speech
    if normalized in _POS_ABBREVIATIONS:
        return _POS_ABBREVIATIONS[normalized]

    for name, abbrev in _POS_ABBREVIATIONS.items():
        if name in normalized or normalized in name:
            return abbrev

    return part_of_speech
