"""
Locate a root inside a derived word.

The root is found by an ordered cascade of strategies, first success wins:

    1. exact_match       case-insensitive substring match of the root
    2. truncated_match   progressively shorter prefixes of the root, down to 3
                         characters ("image" -> "imag" in "imagination")
    3. affix_inference   strip a claimed prefix/suffix from the word's edges
                         and treat what is left as the root

A miss from every strategy is reported as None.  That is a normal outcome:
callers show the word unsegmented.

Usage:
    from wordna.locator import RootLocator

    span = RootLocator().locate("unhelpful", "help")
    span.start, span.end, span.text      # (2, 6, "help")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from wordna.vocabulary import fold, normalize_affix

logger = logging.getLogger(__name__)

# Shortest root truncation tried by truncated_match
MIN_TRUNCATED_ROOT = 3


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Half-open [start, end) range of the root inside the word."""

    start: int
    end: int
    text: str           # word[start:end], original casing
    strategy: str = ""  # name of the strategy that produced the span

    def __len__(self) -> int:
        return self.end - self.start


Strategy = Callable[[str, str, Sequence[str], Sequence[str]], MatchSpan | None]


def _span(word: str, start: int, end: int, strategy: str) -> MatchSpan:
    return MatchSpan(start, end, word[start:end], strategy)


# ── Strategies ───────────────────────────────────────────────────────────

def exact_match(word: str, root: str, prefixes=(), suffixes=()) -> MatchSpan | None:
    """First case-insensitive occurrence of the whole root."""
    if not root:
        return None
    index = fold(word).find(fold(root))
    if index == -1:
        return None
    return _span(word, index, index + len(root), "exact")


def truncated_match(word: str, root: str, prefixes=(), suffixes=()) -> MatchSpan | None:
    """Longest prefix of the root (at least 3 chars) occurring in the word.

    Only tried for roots longer than MIN_TRUNCATED_ROOT.
    """
    if len(root) <= MIN_TRUNCATED_ROOT:
        return None
    folded_word = fold(word)
    folded_root = fold(root)
    for length in range(len(root) - 1, MIN_TRUNCATED_ROOT - 1, -1):
        index = folded_word.find(folded_root[:length])
        if index != -1:
            return _span(word, index, index + length, "truncated")
    return None


def affix_inference(
    word: str, root: str, prefixes: Sequence[str] = (), suffixes: Sequence[str] = (),
) -> MatchSpan | None:
    """Infer the root as what lies between a claimed prefix and suffix.

    The first candidate prefix the word starts with sets the start, the
    first candidate suffix it ends with sets the end.  At least one of them
    must match and the remaining middle must be non-empty.
    """
    folded_word = fold(word)
    start = _edge_affix_length(folded_word, prefixes, str.startswith)
    end_cut = _edge_affix_length(folded_word, suffixes, str.endswith)

    if start is None and end_cut is None:
        return None

    start = start or 0
    end = len(word) - (end_cut or 0)
    if start >= end:
        return None
    return _span(word, start, end, "affix-inference")


def _edge_affix_length(folded_word: str, candidates: Sequence[str], test) -> int | None:
    """Length of the first candidate the word starts (or ends) with."""
    for candidate in candidates:
        if not isinstance(candidate, str):
            continue
        key = normalize_affix(candidate)
        if key and test(folded_word, key):
            return len(key)
    return None


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (exact_match, truncated_match, affix_inference)


# ── Locator ──────────────────────────────────────────────────────────────

class RootLocator:
    """Runs the strategy cascade; the first strategy returning a span wins."""

    def __init__(self, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES):
        self.strategies: tuple[Strategy, ...] = tuple(strategies)

    def locate(
        self,
        word: str,
        root: str,
        prefixes: Sequence[str] = (),
        suffixes: Sequence[str] = (),
    ) -> MatchSpan | None:
        for strategy in self.strategies:
            span = strategy(word, root, prefixes, suffixes)
            if span is not None:
                if span.strategy != "exact":
                    logger.debug(
                        f"Root {root!r} located in {word!r} by {span.strategy}: {span.text!r}"
                    )
                return span
        logger.debug(f"Root {root!r} not found in {word!r}")
        return None
