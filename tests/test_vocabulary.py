"""Tests for the affix vocabulary and glossary (vocabulary.py)."""

import pytest

from conftest import write_json
from wordna.vocabulary import (
    DEFAULT_VOCABULARY_PATH,
    PREFIX,
    SUFFIX,
    AffixEntry,
    AffixVocabulary,
    normalize_affix,
)


# ── normalize_affix ───────────────────────────────────────────────────────────

def test_normalize_affix():
    assert normalize_affix("-ful") == "ful"
    assert normalize_affix("Un-") == "un"
    assert normalize_affix(" -ation- ") == "ation"
    assert normalize_affix("--") == ""
    assert normalize_affix("- un") == "un"
    assert len(normalize_affix("İ-")) == 1


# ── Ingestion ─────────────────────────────────────────────────────────────────

def test_list_input_strips_hyphens_and_dedupes():
    vocab = AffixVocabulary(["-un", "un-", "Re", "", "-"], ["-ful"])
    assert vocab.prefixes == ("un", "re")
    assert vocab.suffixes == ("ful",)


def test_mapping_input_keeps_meanings():
    vocab = AffixVocabulary({"un-": "not"}, {"-ful": "full of"})
    assert vocab.meaning("un") == "not"
    assert vocab.meaning("ful") == "full of"


def test_first_duplicate_wins():
    vocab = AffixVocabulary({"un": "not", "UN": "other"})
    assert vocab.meaning("un") == "not"
    assert len(vocab.prefixes) == 1


def test_len_and_contains(small_vocab):
    assert len(small_vocab) == 12
    assert "-ness" in small_vocab
    assert "xyz" not in small_vocab


# ── Glossary ──────────────────────────────────────────────────────────────────

def test_meaning_prefers_prefix(small_vocab):
    # "in" is both a prefix and a suffix in the fixture
    assert small_vocab.meaning("-in") == "not, into"


def test_meaning_unknown_or_unglossed():
    vocab = AffixVocabulary(["un"], [])
    assert vocab.meaning("un") is None
    assert vocab.meaning("xyz") is None


def test_lookup_returns_both_kinds(small_vocab):
    entries = small_vocab.lookup("IN")
    assert entries == [
        AffixEntry("in", PREFIX, "not, into"),
        AffixEntry("in", SUFFIX, "chemical compound"),
    ]


def test_lookup_unknown(small_vocab):
    assert small_vocab.lookup("xyz") == []


def test_entries_sorted_and_deduped(small_vocab):
    entries = small_vocab.entries()
    prefixes = [e.text for e in entries if e.kind == PREFIX]
    suffixes = [e.text for e in entries if e.kind == SUFFIX]
    assert prefixes == ["dis", "in", "re", "un"]
    assert "in" not in suffixes
    assert suffixes == sorted(suffixes)


def test_entries_by_kind(small_vocab):
    assert all(e.kind == SUFFIX for e in small_vocab.entries(SUFFIX))
    assert len(small_vocab.entries(PREFIX)) == 4


def test_search_by_text(small_vocab):
    texts = [e.text for e in small_vocab.search("ESS")]
    assert texts == ["ness"]


def test_search_by_meaning(small_vocab):
    texts = [e.text for e in small_vocab.search("not")]
    assert texts == ["in", "un"]


def test_search_empty_term_returns_all(small_vocab):
    assert small_vocab.search("  ") == small_vocab.entries()


def test_display():
    assert AffixVocabulary.display(AffixEntry("un", PREFIX, "")) == "un-"
    assert AffixVocabulary.display(AffixEntry("ful", SUFFIX, "")) == "-ful"


def test_summary(small_vocab):
    s = small_vocab.summary()
    assert "Prefixes:" in s
    assert "Both kinds:   1" in s


# ── Loading ───────────────────────────────────────────────────────────────────

def test_from_file_list_format(tmp_path):
    p = write_json(tmp_path / "affixes.json", {"prefixes": ["un-", "re-"], "suffixes": ["-ful"]})
    vocab = AffixVocabulary.from_file(p)
    assert vocab.prefixes == ("un", "re")
    assert vocab.suffixes == ("ful",)


def test_from_file_mapping_format(tmp_path):
    p = write_json(tmp_path / "affixes.json", {"prefixes": {"un": "not"}, "suffixes": {}})
    vocab = AffixVocabulary.from_file(p)
    assert vocab.meaning("un-") == "not"
    assert vocab.suffixes == ()


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        AffixVocabulary.from_file(tmp_path / "nope.json")


def test_from_file_invalid_json(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        AffixVocabulary.from_file(p)


def test_from_file_not_an_object(tmp_path):
    p = write_json(tmp_path / "list.json", ["un", "re"])
    with pytest.raises(ValueError, match="JSON object"):
        AffixVocabulary.from_file(p)


def test_from_file_bad_section_type(tmp_path):
    p = write_json(tmp_path / "bad.json", {"prefixes": "un", "suffixes": []})
    with pytest.raises(ValueError, match="prefixes"):
        AffixVocabulary.from_file(p)


# ── Packaged vocabulary ───────────────────────────────────────────────────────

def test_default_vocabulary_loads(default_vocab):
    assert DEFAULT_VOCABULARY_PATH.exists()
    assert len(default_vocab.prefixes) > 100
    assert len(default_vocab.suffixes) > 150


def test_default_vocabulary_contents(default_vocab):
    assert "un" in default_vocab.prefixes
    assert "ful" in default_vocab.suffixes
    assert "ation" in default_vocab.suffixes
    assert default_vocab.meaning("-less") == "without"


def test_default_vocabulary_is_normalized(default_vocab):
    for affix in default_vocab.prefixes + default_vocab.suffixes:
        assert affix == normalize_affix(affix)
