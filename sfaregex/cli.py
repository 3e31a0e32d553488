"""Command that compares plain DFA matching with parallel SFA matching."""

from __future__ import annotations

import argparse
import re
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from .dot import write_dot
from .regex import compile as compile_regex
from .sfa import build_sfa

DEFAULT_PATTERN = "(ab|abab)*X"
DEFAULT_INPUT = "./testdata/abab.txt"
DEFAULT_PARALLELISM = (1, 20)


def measure(name: str, func: Callable[[], bool]) -> bool:
    """Run ``func``, print its elapsed time in microseconds and its result."""
    started = time.perf_counter_ns()
    result = func()
    elapsed = (time.perf_counter_ns() - started) // 1000
    verdict = "true" if result else "false"
    print(f"{name} \t time:\t {elapsed},\t result: \t {verdict}")
    return result


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sfaregex",
        description="Match a text file with a DFA and with a parallel SFA.",
    )
    parser.add_argument("-e", "--regex", default=DEFAULT_PATTERN, help="pattern to compile")
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT, help="file holding the target text")
    parser.add_argument(
        "-p",
        "--parallel",
        type=int,
        action="append",
        help="number of chunks for SFA matching (may be repeated)",
    )
    parser.add_argument(
        "--dot-dir", default=".", help="directory for the dfa.dot and sfa.dot files"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the pattern, write DOT graphs and time each matcher on the input."""
    args = _parse_args(argv)
    pattern = args.regex
    print(f"regex: {pattern}")

    regexp = compile_regex(pattern)
    dfa = regexp.dfa
    sfa = build_sfa(dfa)

    dot_dir = Path(args.dot_dir)
    write_dot(dfa, str(dot_dir / "dfa"))
    write_dot(sfa.to_dfa(), str(dot_dir / "sfa"))

    data = Path(args.input).read_bytes()
    print(f"target string length: {len(data)} byte\n")
    text = data.decode("utf-8")

    builtin = re.compile(pattern)
    measure("re module\t", lambda: builtin.search(text) is not None)
    measure("DFA\t\t", lambda: dfa.match(text))
    for parallelism in args.parallel or DEFAULT_PARALLELISM:
        measure(
            f"SFA(parallel: {parallelism})",
            lambda p=parallelism: sfa.match(text, p),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())