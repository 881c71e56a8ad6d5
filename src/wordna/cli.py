#!/usr/bin/env python3
"""
Word root segmentation CLI.

Loads wordna.toml if present, or override with flags:

    python -m wordna.cli --segment unhelpful --root help --prefix un --suffix ful
    python -m wordna.cli --analysis help.json
    python -m wordna.cli --affix "not"
    python -m wordna.cli --vocabulary my_affixes.json --segment cats --root cat
"""

import argparse
import logging
import sys
from pathlib import Path

from wordna.logging_config import setup_logging


def _find_default_config() -> Path | None:
    """Look for wordna.toml in CWD."""
    candidate = Path("wordna.toml")
    if candidate.exists():
        return candidate
    return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split English derived words into prefix, root and suffix morphemes"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect wordna.toml)",
    )
    parser.add_argument(
        "--vocabulary",
        metavar="FILE",
        help="Path to an affix vocabulary JSON file (overrides config)",
    )
    parser.add_argument(
        "--separator",
        help="Separator shown between morphemes (overrides config)",
    )
    parser.add_argument(
        "--segment",
        metavar="WORD",
        help="Derived word to segment (requires --root)",
    )
    parser.add_argument(
        "--root",
        help="Root word of the --segment word",
    )
    parser.add_argument(
        "--prefix",
        action="append",
        default=[],
        help="Claimed prefix of the --segment word (repeatable)",
    )
    parser.add_argument(
        "--suffix",
        action="append",
        default=[],
        help="Claimed suffix of the --segment word (repeatable)",
    )
    parser.add_argument(
        "--analysis",
        metavar="FILE",
        help="Render every derived word of a saved analysis JSON file",
    )
    parser.add_argument(
        "--affix",
        metavar="TERM",
        help="Search the affix glossary by affix text or meaning",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the engine summary",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="Also write log records to FILE",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Verbose logging (shows which root strategy matched)",
    )
    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, level=logging.WARNING, debug=args.debug)

    if args.segment and not args.root:
        parser.error("--segment requires --root")
    if not (args.segment or args.analysis or args.affix or args.summary):
        parser.error("nothing to do: pass --segment, --analysis, --affix or --summary")

    # ── Build engine ─────────────────────────────────────────────────────

    from wordna.analysis import AnalysisResult
    from wordna.engine import WordEngine
    from wordna.vocabulary import AffixVocabulary

    try:
        config_path = Path(args.config) if args.config else _find_default_config()
        if config_path is not None:
            engine = WordEngine.from_config(config_path)
        else:
            engine = WordEngine()

        # Explicit flags override config
        if args.vocabulary:
            engine = WordEngine(
                AffixVocabulary.from_file(args.vocabulary), separator=engine.separator,
            )
        if args.separator is not None:
            engine.separator = args.separator
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.summary:
        print(engine.summary())
        print()

    # ── Segment ──────────────────────────────────────────────────────────

    if args.segment:
        print(engine.render(args.segment, args.root, args.prefix, args.suffix))

    # ── Analysis file ────────────────────────────────────────────────────

    if args.analysis:
        try:
            result = AnalysisResult.from_file(args.analysis)
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            sys.exit(1)

        info = result.root_info
        label = "root" if result.is_root else "root of the query"
        print(f"═══ {result.root_word} ({label}) ═══")
        if info.part_of_speech or info.meaning:
            print(f"  [{info.part_of_speech}] {info.phonetic} {info.meaning}".rstrip())
        for phrase in info.common_phrases:
            print(f"  · {phrase}")
        rendered = engine.render_analysis(result)
        if rendered:
            print()
            for r in rendered:
                d = r.derived
                print(f"  {r.text:30s} {r.pos_abbrev:6s} {d.phonetic} {d.meaning}".rstrip())
        print()

    # ── Affix glossary ───────────────────────────────────────────────────

    if args.affix:
        entries = engine.vocabulary.search(args.affix)
        if entries:
            print(f"═══ Affixes matching '{args.affix}' ═══")
            for e in entries:
                print(f"  {engine.vocabulary.display(e):12s} {e.meaning or '(no gloss)'}")
        else:
            print(f"No affix matches '{args.affix}'.")
        print()


if __name__ == "__main__":
    main()
