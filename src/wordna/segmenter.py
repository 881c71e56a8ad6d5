"""
Split a derived word into display morphemes: prefix(es), root, suffix(es).

Given the root span from the locator, the text before the root is
tokenized against the prefix pool and the text after it against the suffix
pool, greedily, longest affix first.  The pools are the word's candidate
affixes merged with the static vocabulary.

    un · help · ful

Separators are their own segment kind, never characters inside a
morpheme, so a renderer can style them however it likes.  Joining the
non-separator segments always gives back the original word, casing
included.

Usage:
    from wordna.segmenter import highlight, render_segments
    from wordna.vocabulary import AffixVocabulary

    segments = highlight("unhelpful", "help", ["un"], ["ful"], AffixVocabulary.default())
    render_segments(segments)        # "un·help·ful"
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wordna.locator import MatchSpan, RootLocator
from wordna.vocabulary import AffixVocabulary, fold, normalize_affix

VOWELS = frozenset("aeiou")

DEFAULT_SEPARATOR = "·"


@dataclass(frozen=True, slots=True)
class Segment:
    """A morpheme, or a separator marker between two morphemes."""

    text: str
    is_separator: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "isSeparator": self.is_separator}


SEPARATOR = Segment("", is_separator=True)


def merge_affixes(candidates: Iterable[str], vocabulary: Iterable[str]) -> list[str]:
    """Normalized union of candidate and vocabulary affixes, longest first.

    Equal lengths are ordered alphabetically so the result does not depend
    on input order.
    """
    pool = {normalize_affix(a) for a in candidates if isinstance(a, str)}
    pool.update(normalize_affix(a) for a in vocabulary)
    pool.discard("")
    return sorted(pool, key=lambda a: (-len(a), a))


def _longest_match(folded: str, offset: int, affixes: Sequence[str]) -> int:
    """Length of the first (longest) affix found at offset, 0 if none."""
    for affix in affixes:
        if folded.startswith(affix, offset):
            return len(affix)
    return 0


def _vowel_consonant_split(folded: str) -> int | None:
    """First index i with a vowel at i-1 and a consonant at i.

    Only interior positions are considered (1 <= i <= len - 2), so a split
    never leaves an empty piece.  None when there is no such position.
    """
    for i in range(1, len(folded) - 1):
        prev, cur = folded[i - 1], folded[i]
        if prev in VOWELS and cur.isalpha() and cur not in VOWELS:
            return i
    return None


class MorphemeSegmenter:
    """Greedy longest-match tokenizer over the prefix and suffix regions.

    Without a vocabulary only the per-word candidate affixes are matched;
    pass AffixVocabulary.default() for the packaged list (WordEngine does).
    """

    def __init__(self, vocabulary: AffixVocabulary | None = None):
        self.vocabulary = vocabulary if vocabulary is not None else AffixVocabulary()

    def segment(
        self,
        word: str,
        span: MatchSpan,
        prefixes: Sequence[str] = (),
        suffixes: Sequence[str] = (),
    ) -> list[Segment]:
        """Segments for word, with span marking the root."""
        effective_prefixes = merge_affixes(prefixes, self.vocabulary.prefixes)
        effective_suffixes = merge_affixes(suffixes, self.vocabulary.suffixes)

        segments = self._prefix_region(word[:span.start], effective_prefixes)
        if segments:
            segments.append(SEPARATOR)
        segments.append(Segment(word[span.start:span.end]))
        segments.extend(self._suffix_region(word[span.end:], effective_suffixes))
        return segments

    @staticmethod
    def _prefix_region(region: str, affixes: Sequence[str]) -> list[Segment]:
        """Tokenize left to right; an unmatched remainder is kept whole."""
        segments: list[Segment] = []
        folded = fold(region)
        offset = 0
        while offset < len(region):
            length = _longest_match(folded, offset, affixes)
            if not length:
                segments.append(Segment(region[offset:]))
                break
            segments.append(Segment(region[offset:offset + length]))
            offset += length
            if offset < len(region):
                segments.append(SEPARATOR)
        return segments

    @staticmethod
    def _suffix_region(region: str, affixes: Sequence[str]) -> list[Segment]:
        """Tokenize left to right, every segment preceded by a separator.

        When no suffix matches, the remainder is cut once at its first
        vowel-consonant boundary and matching resumes after the cut; with
        no boundary the remainder is kept whole.
        """
        segments: list[Segment] = []
        folded = fold(region)
        offset = 0
        while offset < len(region):
            segments.append(SEPARATOR)
            length = _longest_match(folded, offset, affixes)
            if not length:
                split = _vowel_consonant_split(folded[offset:])
                if split is None:
                    segments.append(Segment(region[offset:]))
                    break
                length = split
            segments.append(Segment(region[offset:offset + length]))
            offset += length
        return segments


def highlight(
    word: str,
    root: str,
    prefixes: Sequence[str] = (),
    suffixes: Sequence[str] = (),
    vocabulary: AffixVocabulary | None = None,
    locator: RootLocator | None = None,
) -> list[Segment]:
    """Locate the root and segment the word.

    Returns a single whole-word segment when the root cannot be located.
    vocabulary defaults to an empty AffixVocabulary, so only the candidate
    affixes are matched; unlike WordEngine, the packaged list is not loaded.
    """
    locator = locator or RootLocator()
    span = locator.locate(word, root, prefixes, suffixes)
    if span is None:
        return [Segment(word)]
    return MorphemeSegmenter(vocabulary).segment(word, span, prefixes, suffixes)


def morphemes(segments: Iterable[Segment]) -> list[str]:
    """Texts of the non-separator segments, in order."""
    return [s.text for s in segments if not s.is_separator]


def render_segments(segments: Iterable[Segment], separator: str = DEFAULT_SEPARATOR) -> str:
    return "".join(separator if s.is_separator else s.text for s in segments)
