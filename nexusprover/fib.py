"""Fibonacci guest program with configurable starting values."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable

_U32_MASK = 0xFFFFFFFF
_U32_PATTERN = re.compile(r"\+?[0-9]+")


def fib(n: int, init_a: int, init_b: int) -> int:
    """Advance the Fibonacci recurrence n steps from (init_a, init_b) with 32-bit wrapping."""
    prev, curr = init_a & _U32_MASK, init_b & _U32_MASK
    for _ in range(n):
        prev, curr = curr, (prev + curr) & _U32_MASK
    return curr


def _parse_u32(text: str) -> int:
    stripped = text.strip()
    if not _U32_PATTERN.fullmatch(stripped):
        raise ValueError(f"invalid digit found in string: {stripped!r}")
    value = int(stripped)
    if value > _U32_MASK:
        raise ValueError("number too large to fit in target type")
    return value


def _parse_or_default(line: str | None, default: int = 1) -> int:
    if line is None:
        return default
    try:
        return _parse_u32(line)
    except ValueError:
        return default


def read_inputs(stream: Iterable[str]) -> tuple[int, int, int]:
    """Read (n, init_a, init_b) from lines; the last two default to 1."""
    lines = iter(stream)
    first = next(lines, None)
    if first is None:
        raise ValueError("No first input provided")
    try:
        n = _parse_u32(first)
    except ValueError as exc:
        raise ValueError(f"Failed to parse first input as u32: {exc}") from exc
    init_a = _parse_or_default(next(lines, None))
    init_b = _parse_or_default(next(lines, None))
    return n, init_a, init_b


def main(argv: list[str] | None = None) -> int:
    """Read inputs from standard input and print the resulting Fibonacci value."""
    parser = argparse.ArgumentParser(
        description="Compute a Fibonacci value from n, init_a and init_b read on stdin."
    )
    parser.parse_args(argv)
    try:
        n, init_a, init_b = read_inputs(sys.stdin)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(fib(n, init_a, init_b))
    return 0