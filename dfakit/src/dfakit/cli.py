"""Command line interface for dfakit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dfakit import __version__
from dfakit.config import DEFAULT_WORD_LIMIT
from dfakit.core.automaton import Automaton
from dfakit.errors import AutomatonError
from dfakit.serialization import load_automaton
from dfakit.session import validate_word_input

logger = logging.getLogger(__name__)

EXAMPLES = """
Examples:
  dfakit show automaton.json
  dfakit evaluate automaton.json ab aab b
  dfakit words automaton.json -n 5
  dfakit dot automaton.json > automaton.dot
  dfakit plot automaton.json -o automaton.png --word aab
"""


def _show(automaton: Automaton, args: argparse.Namespace) -> int:
    print(automaton)
    print(f"valid: {automaton.is_valid()}")
    missing = automaton.missing_transitions()
    if missing:
        print("missing transitions: " + ", ".join(f"({s}, {c})" for s, c in missing))
    return 0


def _evaluate(automaton: Automaton, args: argparse.Namespace) -> int:
    all_accepted = True
    for word in args.words:
        shown = word if word else "λ"
        reason = validate_word_input(word, automaton)
        if reason is not None:
            print(f"{shown}: REJECTED - {reason}")
            all_accepted = False
            continue
        result = automaton.evaluate(word)
        verdict = "ACCEPTED" if result.accepted else "REJECTED"
        print(f"{shown}: {verdict} - {result.message}")
        if result.path is not None:
            print(f"  path: {result.path}")
        all_accepted = all_accepted and result.accepted
    return 0 if all_accepted else 1


def _words(automaton: Automaton, args: argparse.Namespace) -> int:
    if not automaton.is_valid():
        logger.warning("automaton is incomplete; no words can be generated")
    words = automaton.shortest_accepted_words(args.limit)
    for i, word in enumerate(words, start=1):
        print(f"{i}. {word if word else 'λ (empty word)'}")
    return 0


def _dot(automaton: Automaton, args: argparse.Namespace) -> int:
    from dfakit.viz.plotting import to_dot

    print(to_dot(automaton))
    return 0


def _plot(automaton: Automaton, args: argparse.Namespace) -> int:
    import matplotlib

    matplotlib.use("Agg")
    from dfakit.viz.plotting import plot_automaton, save_figure

    highlight = automaton.evaluate(args.word) if args.word is not None else None
    plot_automaton(automaton, title=args.title, layout=args.layout, highlight=highlight)
    save_figure(args.output)
    logger.info("diagram written to %s", args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfakit",
        description="Inspect, evaluate and draw deterministic finite automata.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed records instead of skipping them",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the automaton and its completeness")
    show.add_argument("file", help="Automaton file")
    show.set_defaults(handler=_show)

    evaluate = sub.add_parser("evaluate", help="Evaluate words (exit status 1 if any is rejected)")
    evaluate.add_argument("file", help="Automaton file")
    evaluate.add_argument("words", nargs="+", help='Words to evaluate ("" for the empty word)')
    evaluate.set_defaults(handler=_evaluate)

    words = sub.add_parser("words", help="List the shortest accepted words")
    words.add_argument("file", help="Automaton file")
    words.add_argument(
        "-n", "--limit",
        type=int,
        default=DEFAULT_WORD_LIMIT,
        help=f"Maximum number of words (default: {DEFAULT_WORD_LIMIT})",
    )
    words.set_defaults(handler=_words)

    dot = sub.add_parser("dot", help="Print a Graphviz DOT description")
    dot.add_argument("file", help="Automaton file")
    dot.set_defaults(handler=_dot)

    plot = sub.add_parser("plot", help="Draw the state diagram to an image file")
    plot.add_argument("file", help="Automaton file")
    plot.add_argument("-o", "--output", required=True, help="Output image path (e.g. diagram.png)")
    plot.add_argument("--title", default="Automaton", help="Plot title")
    plot.add_argument("--layout", choices=["circular", "spring"], default="circular")
    plot.add_argument("--word", default=None, help="Highlight the path of this word")
    plot.set_defaults(handler=_plot)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        automaton = load_automaton(args.file, strict=args.strict)
        return args.handler(automaton, args)
    except AutomatonError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
