"""stepsearch CLI entry point.

Usage: uv run stepsearch [-v] [command]
"""
import argparse
import logging
import sys

from stepsearch.algorithms import ALGORITHMS, BoyerMoore, KMP, create
from stepsearch.session import SearchSession


def _add_algorithm_option(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--algorithm", "-a", choices=list(ALGORITHMS), default="kmp",
        help="Search algorithm to use (default: kmp)",
    )


def _add_trace_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "trace",
        help="Print every comparison made while searching TEXT for PATTERN.",
    )
    p.add_argument("text")
    p.add_argument("pattern")
    _add_algorithm_option(p)
    p.add_argument(
        "--max-steps", type=int, default=None,
        help="Stop after this many steps (default: bounded by text length)",
    )


def _add_tables_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "tables",
        help="Print the preprocessing tables built from PATTERN.",
    )
    p.add_argument("pattern")
    _add_algorithm_option(p)


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Run every algorithm on the same input and compare step counts.",
    )
    p.add_argument("text")
    p.add_argument("pattern")


def _describe_end(session: SearchSession) -> str:
    span = session.match_span()
    if span is not None:
        return f"{session.state().name} at {span[0]}..{span[1]}"
    return session.state().name


def _run_trace(args: argparse.Namespace) -> None:
    session = SearchSession(args.algorithm, text=args.text, pattern=args.pattern)
    print(f"{session.engine.title}: {args.pattern!r} in {args.text!r}")
    print(f"{'step':>4}  {'text':>4}  {'patt':>4}  {'result':<8}  {'offset':>6}")
    for n, match in enumerate(session.run(args.max_steps), start=1):
        t = args.text[match.text_index]
        p = args.pattern[match.pattern_index]
        result = "match" if match.matched else "mismatch"
        op = "==" if match.matched else "!="
        print(
            f"{n:>4}  {match.text_index:>4}  {match.pattern_index:>4}  "
            f"{result:<8}  {session.pattern_offset():>6}  {t!r} {op} {p!r}"
        )
    print(_describe_end(session))


def _run_tables(args: argparse.Namespace) -> None:
    engine = create(args.algorithm)
    engine.set_pattern(args.pattern)
    print(f"{engine.title}: {args.pattern!r}")
    if isinstance(engine, KMP):
        print(f"  failure:     {list(engine.failure_table)}")
    elif isinstance(engine, BoyerMoore):
        bad_char = ", ".join(f"{c!r}: {v}" for c, v in engine.bad_char_table.items())
        print(f"  bad char:    {{{bad_char}}} (default {len(args.pattern)})")
        print(f"  good suffix: {list(engine.good_suffix_table)}")


def _run_compare(args: argparse.Namespace) -> None:
    for name in ALGORITHMS:
        session = SearchSession(name, text=args.text, pattern=args.pattern)
        steps = len(session.run())
        print(f"{session.engine.title:<20} {steps:>5} steps  {_describe_end(session)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="stepsearch",
        description="Step through Knuth-Morris-Pratt and Boyer-Moore string search.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log table construction and state changes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_trace_parser(subparsers)
    _add_tables_parser(subparsers)
    _add_compare_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "trace":
        if args.max_steps is not None and args.max_steps <= 0:
            parser.error("--max-steps must be positive")
        _run_trace(args)
    elif args.command == "tables":
        _run_tables(args)
    elif args.command == "compare":
        _run_compare(args)
