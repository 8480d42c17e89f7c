"""fuzzymatch-lite CLI entry point.

Usage:
    echo "a?a aaaa" | fuzzymatch-lite         # match (default)
    echo "a*c abcadc" | fuzzymatch-lite match --wildcard "*"
    fuzzymatch-lite profile --compare
"""
import argparse
import logging
import sys

from fuzzymatch_lite.matching.wildcard import DEFAULT_WILDCARD, find_fuzzy_matches
from fuzzymatch_lite.reader import InputError, format_matches, read_tokens

log = logging.getLogger(__name__)


def _wildcard_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(
            f"wildcard must be a single character, got {value!r}"
        )
    return value


def _common_options(with_defaults: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand.

    Subcommand copies use SUPPRESS so they do not overwrite a value
    given before the subcommand name.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--wildcard", type=_wildcard_char,
        default=DEFAULT_WILDCARD if with_defaults else argparse.SUPPRESS,
        help=f"Character matching any single character (default: {DEFAULT_WILDCARD})",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true",
        default=False if with_defaults else argparse.SUPPRESS,
        help="Log debug output to stderr.",
    )
    return common


def _add_match_parser(
    subparsers: argparse._SubParsersAction, common: argparse.ArgumentParser
) -> None:
    subparsers.add_parser(
        "match",
        parents=[common],
        help="Read a pattern and a text from stdin and print match positions "
             "(the default).",
    )


def _add_profile_parser(
    subparsers: argparse._SubParsersAction, common: argparse.ArgumentParser
) -> None:
    p = subparsers.add_parser(
        "profile",
        parents=[common],
        help="Time the automaton matcher on a random text.",
    )
    p.add_argument(
        "--text-length", type=int, default=100_000,
        help="Length of the generated text (default: 100000)",
    )
    p.add_argument(
        "--pattern", default="ab?a??b",
        help="Pattern to search for (default: ab?a??b)",
    )
    p.add_argument(
        "--alphabet", default="ab",
        help="Characters the text is drawn from (default: ab)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )
    p.add_argument(
        "--compare", action="store_true",
        help="Run both the naive and the automaton matcher and print a comparison.",
    )


def _run_match(args: argparse.Namespace) -> int:
    try:
        pattern, text = read_tokens(sys.stdin, count=2)
    except InputError as exc:
        log.debug("Rejected input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    positions = find_fuzzy_matches(pattern, text, args.wildcard)
    sys.stdout.write(format_matches(positions))
    return 0


def _run_profile(args: argparse.Namespace) -> int:
    from fuzzymatch_lite.profiling.harness import run_scan, run_scan_naive
    from fuzzymatch_lite.profiling.report import format_comparison, format_report

    common = dict(
        text_length=args.text_length,
        pattern=args.pattern,
        alphabet=args.alphabet,
        seed=args.seed,
        wildcard=args.wildcard,
    )

    if args.compare:
        before = run_scan_naive(**common)
        after = run_scan(**common)
        print(format_report(before, label="Before (naive)"))
        print()
        print(format_report(after, label="After (automaton)"))
        print()
        print(format_comparison(before, after))
    else:
        result = run_scan(**common, profile=args.cprofile)
        print(format_report(result))
        if result.cprofile_stats:
            print()
            print("--- cProfile top functions ---")
            print(result.cprofile_stats)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fuzzymatch-lite",
        description="Streaming wildcard pattern matching -- pure Python.",
        parents=[_common_options(with_defaults=True)],
    )
    subparsers = parser.add_subparsers(dest="command")

    sub_common = _common_options(with_defaults=False)
    _add_match_parser(subparsers, sub_common)
    _add_profile_parser(subparsers, sub_common)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "profile":
        return _run_profile(args)
    return _run_match(args)


if __name__ == "__main__":
    sys.exit(main())
