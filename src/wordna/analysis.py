"""
Word analysis results as returned by the text-generation service.

A result names the root word, describes it, and lists derived words, each
tagged with the prefixes and suffixes the service claims compose it.  The
payload uses camelCase keys; fields the service left out default to empty
values so a partial answer still renders.

Usage:
    from wordna.analysis import AnalysisResult

    result = AnalysisResult.from_file("help.json")
    for d in result.derived_words:
        print(d.word, d.prefixes, d.suffixes)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class RootInfo:
    part_of_speech: str = ""
    phonetic: str = ""
    meaning: str = ""
    common_phrases: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> RootInfo:
        if not isinstance(data, dict):
            return cls()
        return cls(
            part_of_speech=_str(data.get("partOfSpeech")),
            phonetic=_str(data.get("phonetic")),
            meaning=_str(data.get("meaning")),
            common_phrases=_str_list(data.get("commonPhrases")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "partOfSpeech": self.part_of_speech,
            "phonetic": self.phonetic,
            "meaning": self.meaning,
            "commonPhrases": list(self.common_phrases),
        }


@dataclass(slots=True)
class DerivedWord:
    """A word derived from the root, with the service's claimed affixes."""

    word: str
    prefixes: list[str] = field(default_factory=list)
    suffixes: list[str] = field(default_factory=list)
    part_of_speech: str = ""
    phonetic: str = ""
    meaning: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DerivedWord:
        return cls(
            word=_str(data.get("word")),
            prefixes=_str_list(data.get("prefixes")),
            suffixes=_str_list(data.get("suffixes")),
            part_of_speech=_str(data.get("partOfSpeech")),
            phonetic=_str(data.get("phonetic")),
            meaning=_str(data.get("meaning")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "prefixes": list(self.prefixes),
            "suffixes": list(self.suffixes),
            "partOfSpeech": self.part_of_speech,
            "phonetic": self.phonetic,
            "meaning": self.meaning,
        }


@dataclass(slots=True)
class AnalysisResult:
    is_root: bool
    root_word: str
    root_info: RootInfo = field(default_factory=RootInfo)
    derived_words: list[DerivedWord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AnalysisResult:
        """Build from a decoded service payload.

        Raises ValueError if the payload is not an object or has no rootWord.
        Derived words without a word are skipped.
        """
        if not isinstance(data, dict):
            raise ValueError("Analysis payload must be a JSON object")
        root_word = _str(data.get("rootWord")).strip()
        if not root_word:
            raise ValueError("Analysis payload has no 'rootWord'")

        derived = []
        raw_derived = data.get("derivedWords")
        if isinstance(raw_derived, list):
            for item in raw_derived:
                if not isinstance(item, dict):
                    continue
                d = DerivedWord.from_dict(item)
                if d.word:
                    derived.append(d)

        return cls(
            is_root=bool(data.get("isRoot", False)),
            root_word=root_word,
            root_info=RootInfo.from_dict(data.get("rootInfo")),
            derived_words=derived,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> AnalysisResult:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Analysis file not found: {path}")
        with path.open(encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in analysis file {path}: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isRoot": self.is_root,
            "rootWord": self.root_word,
            "rootInfo": self.root_info.to_dict(),
            "derivedWords": [d.to_dict() for d in self.derived_words],
        }


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _str_list(value: Any) -> list[str]:
    """Keep only the string items of a list; anything else becomes []."""
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]
