"""wordna: English word root and affix segmentation for display."""

from wordna.vocabulary import AffixVocabulary, AffixEntry
from wordna.locator import RootLocator, MatchSpan
from wordna.segmenter import MorphemeSegmenter, Segment, SEPARATOR, highlight, render_segments
from wordna.analysis import AnalysisResult, DerivedWord, RootInfo
from wordna.pos import abbreviate_part_of_speech
from wordna.engine import WordEngine, RenderedWord

__all__ = [
    "AffixVocabulary", "AffixEntry",
    "RootLocator", "MatchSpan",
    "MorphemeSegmenter", "Segment", "SEPARATOR", "highlight", "render_segments",
    "AnalysisResult", "DerivedWord", "RootInfo",
    "abbreviate_part_of_speech",
    "WordEngine", "RenderedWord",
]
