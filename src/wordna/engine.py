"""
Word segmentation engine.

Ties the affix vocabulary, the root locator and the morpheme segmenter
together behind one interface, with TOML-based configuration.

Usage:
    from wordna.engine import WordEngine

    engine = WordEngine.from_config()                 # loads wordna.toml
    engine.render("unhelpful", "help", ["un"], ["ful"])   # "un·help·ful"

    result = AnalysisResult.from_file("help.json")
    for rendered in engine.render_analysis(result):
        print(rendered.text, rendered.pos_abbrev)

    # Or build manually:
    engine = WordEngine(AffixVocabulary.from_file("affixes.json"), separator="-")
"""

from __future__ import annotations

import tomllib
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from wordna.analysis import AnalysisResult, DerivedWord
from wordna.locator import RootLocator
from wordna.pos import abbreviate_part_of_speech
from wordna.segmenter import (
    DEFAULT_SEPARATOR,
    MorphemeSegmenter,
    Segment,
    render_segments,
)
from wordna.vocabulary import AffixVocabulary


@dataclass(slots=True)
class RenderedWord:
    """A derived word ready for display."""

    derived: DerivedWord
    segments: list[Segment]
    text: str            # segments joined with the engine's separator
    pos_abbrev: str

    @property
    def is_segmented(self) -> bool:
        return any(s.is_separator for s in self.segments)

    def __repr__(self) -> str:
        return f"RenderedWord({self.text!r} [{self.pos_abbrev}])"


class WordEngine:
    """Segments derived words against a shared, read-only vocabulary."""

    def __init__(
        self,
        vocabulary: AffixVocabulary | None = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        self.vocabulary = vocabulary if vocabulary is not None else AffixVocabulary.default()
        self.separator = separator
        self.locator = RootLocator()
        self.segmenter = MorphemeSegmenter(self.vocabulary)

    @classmethod
    def from_config(cls, config_path: str | Path = "wordna.toml") -> WordEngine:
        """Build a WordEngine from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            try:
                cfg = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        base_dir = config_path.parent

        vocabulary = None
        vocab_path = cfg.get("vocabulary", {}).get("path")
        if vocab_path:
            vocab_path = Path(vocab_path)
            if not vocab_path.is_absolute():
                vocab_path = base_dir / vocab_path
            vocabulary = AffixVocabulary.from_file(vocab_path)

        separator = cfg.get("display", {}).get("separator", DEFAULT_SEPARATOR)
        if not isinstance(separator, str):
            raise ValueError(f"[display] separator must be a string in {config_path}")

        return cls(vocabulary, separator=separator)

    # ── Segmentation ─────────────────────────────────────────────────────

    def segment(
        self,
        word: str,
        root: str,
        prefixes: Sequence[str] = (),
        suffixes: Sequence[str] = (),
    ) -> list[Segment]:
        """Segments for word; one whole-word segment if the root is not found."""
        span = self.locator.locate(word, root, prefixes, suffixes)
        if span is None:
            return [Segment(word)]
        return self.segmenter.segment(word, span, prefixes, suffixes)

    def render(
        self,
        word: str,
        root: str,
        prefixes: Sequence[str] = (),
        suffixes: Sequence[str] = (),
    ) -> str:
        return render_segments(self.segment(word, root, prefixes, suffixes), self.separator)

    def render_analysis(self, result: AnalysisResult) -> list[RenderedWord]:
        """Render every derived word of an analysis against its root."""
        rendered = []
        for derived in result.derived_words:
            segments = self.segment(
                derived.word, result.root_word, derived.prefixes, derived.suffixes,
            )
            rendered.append(RenderedWord(
                derived=derived,
                segments=segments,
                text=render_segments(segments, self.separator),
                pos_abbrev=abbreviate_part_of_speech(derived.part_of_speech),
            ))
        return rendered

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        strategies = ", ".join(
            getattr(s, "__name__", repr(s)) for s in self.locator.strategies
        )
        lines = ["WordEngine"]
        lines.append(f"  Separator:  {self.separator!r}")
        lines.append(f"  Strategies: {strategies}")
        for sub_line in self.vocabulary.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)
