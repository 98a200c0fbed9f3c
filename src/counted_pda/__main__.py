import argparse
import logging
import sys

from . import Accepted, InvalidSymbolError, PDAEngine
from .symbols import describe


def _print_outcome(engine: PDAEngine) -> int:
    outcome = engine.outcome
    if isinstance(outcome, Accepted):
        print("accepted")
        return 0
    print(f"rejected: {outcome.reason}")
    return 1


def run_batch(text: str, *, show_trace: bool = True) -> int:
    engine = PDAEngine()
    try:
        engine.load_input(text)
    except InvalidSymbolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    engine.run_to_completion()
    if show_trace:
        for entry in engine.trace_entries:
            print(entry)
    return _print_outcome(engine)


def run_interactive(text: str, *, show_trace: bool = True) -> int:
    engine = PDAEngine()
    try:
        engine.load_input(text)
    except InvalidSymbolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if show_trace:
        print(engine.trace_entries[-1])
    while not engine.halted:
        expected = ", ".join(sorted(describe(s) for s in engine.expected_symbols()))
        reply = input(f"[{engine.current_state} expects {expected}] Enter to step, q to quit: ")
        if reply.strip().lower() == "q":
            print("stopped")
            return 1
        seen = len(engine.trace_entries)
        engine.step()
        if show_trace:
            for entry in engine.trace_entries[seen:]:
                print(entry)
    return _print_outcome(engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="counted-pda",
        description=(
            "Run the pushdown automaton for a^n b^m x y^p c^m a^n "
            "(n >= 2, m >= 1) over an input string and print its trace."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="aabxcaa",
        help="Input string over the alphabet a b x y c (default: 'aabxcaa').",
    )
    parser.add_argument(
        "--step",
        action="store_true",
        help="Advance one transition per Enter keypress instead of running to the end.",
    )
    parser.add_argument(
        "--no-trace",
        action="store_true",
        help="Only print the outcome.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the engine (default: WARNING).",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    runner = run_interactive if args.step else run_batch
    return runner(args.input, show_trace=not args.no_trace)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
