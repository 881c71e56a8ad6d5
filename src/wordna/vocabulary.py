"""
English affix vocabulary with glosses.

Loads the affix list (known prefixes and suffixes, several hundred each)
used as the supplementary matching pool by the segmenter, and doubles as
the affix glossary: look up what a prefix or suffix means, or search the
list by text or meaning.

Usage:
    from wordna.vocabulary import AffixVocabulary

    vocab = AffixVocabulary.default()            # packaged data/affixes.json
    vocab = AffixVocabulary.from_file("my_affixes.json")
    vocab.meaning("-ful")                        # "full of, amount of"
    for entry in vocab.search("not"):
        print(vocab.display(entry), entry.meaning)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_PATH = Path(__file__).parent / "data" / "affixes.json"

PREFIX = "prefix"
SUFFIX = "suffix"


def fold(text: str) -> str:
    """Lowercase character by character, keeping the string length.

    Characters whose lowercase form is longer than one character (e.g.
    U+0130) are kept as-is so indices on the folded text stay valid on
    the original.
    """
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)


def normalize_affix(affix: str) -> str:
    """Strip surrounding whitespace and hyphens, fold case.

    "-ful" -> "ful", "Un-" -> "un", "- un" -> "un", "--" -> "".
    """
    return fold(affix.strip().strip("-").strip())


@dataclass(frozen=True, slots=True)
class AffixEntry:
    """A single glossary entry: the bare affix, its kind and its gloss."""
    text: str
    kind: str        # "prefix" or "suffix"
    meaning: str     # empty when the source gave no gloss


class AffixVocabulary:
    """
    Static prefix/suffix vocabulary, read-only once loaded.

    prefixes / suffixes are tuples of bare, lowercase affixes in file order.
    """

    def __init__(
        self,
        prefixes: Iterable[str] | Mapping[str, str] = (),
        suffixes: Iterable[str] | Mapping[str, str] = (),
    ):
        prefix_meanings = _ingest(prefixes)
        suffix_meanings = _ingest(suffixes)
        self.prefixes: tuple[str, ...] = tuple(prefix_meanings)
        self.suffixes: tuple[str, ...] = tuple(suffix_meanings)
        self._meanings: dict[str, dict[str, str]] = {
            PREFIX: prefix_meanings,
            SUFFIX: suffix_meanings,
        }

    @classmethod
    def from_file(cls, path: str | Path) -> AffixVocabulary:
        """Load a vocabulary from a JSON file.

        The file holds an object with "prefixes" and "suffixes"; each is
        either an {affix: meaning} object or a plain list of affixes.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Affix vocabulary not found: {path}")

        with path.open(encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in affix vocabulary {path}: {e}") from e

        vocab = cls.from_dict(data, source=str(path))
        logger.info(
            f"Loaded affix vocabulary from {path}: "
            f"{len(vocab.prefixes)} prefixes, {len(vocab.suffixes)} suffixes"
        )
        return vocab

    @classmethod
    def from_dict(cls, data: object, source: str = "<dict>") -> AffixVocabulary:
        if not isinstance(data, dict):
            raise ValueError(f"Affix vocabulary {source} must be a JSON object")
        for key in ("prefixes", "suffixes"):
            value = data.get(key, [])
            if not isinstance(value, (list, dict)):
                raise ValueError(
                    f"Affix vocabulary {source}: '{key}' must be a list or an object"
                )
        return cls(data.get("prefixes", []), data.get("suffixes", []))

    @classmethod
    def default(cls) -> AffixVocabulary:
        """Load the vocabulary shipped with the package."""
        return cls.from_file(DEFAULT_VOCABULARY_PATH)

    # ── Glossary ─────────────────────────────────────────────────────────

    def meaning(self, affix: str) -> str | None:
        """Gloss for an affix. The prefix gloss wins when it is both."""
        key = normalize_affix(affix)
        for kind in (PREFIX, SUFFIX):
            if key in self._meanings[kind]:
                return self._meanings[kind][key] or None
        return None

    def lookup(self, affix: str) -> list[AffixEntry]:
        """All entries for an affix (one per kind it belongs to)."""
        key = normalize_affix(affix)
        return [
            AffixEntry(key, kind, self._meanings[kind][key])
            for kind in (PREFIX, SUFFIX)
            if key in self._meanings[kind]
        ]

    def entries(self, kind: str | None = None) -> list[AffixEntry]:
        """Alphabetical entries, prefixes first.

        An affix listed as both prefix and suffix appears once, as a prefix.
        """
        result = []
        if kind in (None, PREFIX):
            result.extend(
                AffixEntry(text, PREFIX, self._meanings[PREFIX][text])
                for text in sorted(self.prefixes)
            )
        if kind in (None, SUFFIX):
            result.extend(
                AffixEntry(text, SUFFIX, self._meanings[SUFFIX][text])
                for text in sorted(self.suffixes)
                if text not in self._meanings[PREFIX]
            )
        return result

    def search(self, term: str) -> list[AffixEntry]:
        """Entries whose text or meaning contains term (case-insensitive)."""
        needle = term.strip().lower()
        if not needle:
            return self.entries()
        return [
            e for e in self.entries()
            if needle in e.text or needle in e.meaning.lower()
        ]

    @staticmethod
    def display(entry: AffixEntry) -> str:
        """Hyphenated display form: "un-" or "-ful"."""
        return f"{entry.text}-" if entry.kind == PREFIX else f"-{entry.text}"

    def __contains__(self, affix: str) -> bool:
        key = normalize_affix(affix)
        return key in self._meanings[PREFIX] or key in self._meanings[SUFFIX]

    def __len__(self) -> int:
        return len(self.prefixes) + len(self.suffixes)

    def summary(self) -> str:
        both = set(self.prefixes) & set(self.suffixes)
        glossed = sum(
            1 for kind in (PREFIX, SUFFIX)
            for meaning in self._meanings[kind].values() if meaning
        )
        lines = ["Affix vocabulary"]
        lines.append(f"  Prefixes:     {len(self.prefixes):,}")
        lines.append(f"  Suffixes:     {len(self.suffixes):,}")
        lines.append(f"  Both kinds:   {len(both):,}")
        lines.append(f"  With glosses: {glossed:,}")
        return "\n".join(lines)


def _ingest(raw: Iterable[str] | Mapping[str, str]) -> dict[str, str]:
    """Normalize affixes into an ordered {affix: meaning} dict.

    Empty affixes are dropped; the first occurrence of a duplicate wins.
    """
    if isinstance(raw, Mapping):
        pairs = raw.items()
    else:
        pairs = ((affix, "") for affix in raw)

    result: dict[str, str] = {}
    for affix, meaning in pairs:
        if not isinstance(affix, str):
            continue
        key = normalize_affix(affix)
        if key and key not in result:
            result[key] = meaning if isinstance(meaning, str) else ""
    return result
