"""Ford-Johnson merge-insertion sort of positive integers given on the command line."""

from __future__ import annotations

import bisect
import re
import sys
import time
from collections import deque
from typing import Any, Callable, Iterable, Sequence, TypeVar

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

T = TypeVar("T")


class PmergeError(Exception):
    """Base class for argument errors."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


class NegativeElementError(PmergeError):
    """An argument is a negative number."""


class DuplicateElementError(PmergeError):
    """An argument appears more than once."""


def jacobsthal(n: int) -> list[int]:
    """Return the insertion bounds used for ``n`` pending elements.

    The sequence starts 1, 3 and continues with ``a[k] = a[k-1] + 2 * a[k-2]``
    until a term reaches or exceeds ``n``.
    """
    if n <= 0:
        return []
    bounds = [1]
    if n == 1:
        return bounds
    bounds.append(3)
    while bounds[-1] < n:
        bounds.append(bounds[-1] + 2 * bounds[-2])
    return bounds


def _merge_insert(items: Sequence[T], key: Callable[[T], Any], factory: Callable[..., Any]) -> Any:
    if len(items) <= 1:
        return factory(items)

    stray = items[-1] if len(items) % 2 else None
    has_stray = len(items) % 2 != 0
    paired = list(items[:-1]) if has_stray else list(items)

    pairs = factory()
    for first, second in zip(paired[0::2], paired[1::2]):
        if key(first) < key(second):
            pairs.append((second, first))
        else:
            pairs.append((first, second))

    sorted_pairs = _merge_insert(pairs, lambda pair: key(pair[0]), factory)

    chain = factory(winner for winner, _ in sorted_pairs)
    losers = [loser for _, loser in sorted_pairs]
    chain.insert(0, losers[0])

    last_inserted = 1
    for bound in jacobsthal(len(losers))[1:]:
        current = min(bound, len(losers))
        for index in range(current - 1, last_inserted - 1, -1):
            loser = losers[index]
            position = bisect.bisect_left(chain, key(loser), key=key)
            chain.insert(position, loser)
        last_inserted = current
        if last_inserted >= len(losers):
            break

    if has_stray:
        position = bisect.bisect_left(chain, key(stray), key=key)
        chain.insert(position, stray)

    return chain


def merge_insert_sort(values: Iterable[int]) -> list[int] | deque[int]:
    """Return the values sorted by merge-insertion.

    A deque input gives a deque back; any other iterable gives a list.
    """
    factory: Callable[..., Any] = deque if isinstance(values, deque) else list
    return _merge_insert(list(values), lambda item: item, factory)


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Convert arguments to integers, rejecting negatives and duplicates."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = _leading_int(arg)
        if value < 0:
            raise NegativeElementError()
        if value in seen:
            raise DuplicateElementError()
        seen.add(value)
        values.append(value)
    return values


def _line(label: str, values: Iterable[int]) -> str:
    return label + "".join(f"{value} " for value in values)


def _timed(values: Iterable[int]) -> tuple[Any, int]:
    start = time.perf_counter_ns()
    result = merge_insert_sort(values)
    return result, (time.perf_counter_ns() - start) // 1000


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: sort the arguments and report timings."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            "No arguments provided, input one or more arguments!\n"
            "type in PmergeMe <positive-int> ..."
        )
        return 1
    try:
        values = parse_arguments(args)
    except PmergeError as exc:
        print(exc, file=sys.stderr)
        return 3

    print(_line("Before:  ", values))
    sorted_list, list_us = _timed(list(values))
    sorted_deque, deque_us = _timed(deque(values))
    print(_line("After:   ", sorted_list))
    print(f"Time to process a range of {len(sorted_list)} elements with list :  {list_us}us ")
    print(f"Time to process a range of {len(sorted_deque)} elements with deque :  {deque_us}us ")
    return 0


if __name__ == "__main__":
    sys.exit(main())