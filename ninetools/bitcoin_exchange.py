"""Bitcoin value lookup against a CSV table of historical exchange rates."""

from __future__ import annotations

import bisect
import math
import re
import struct
import sys
from pathlib import Path
from typing import IO, Iterable, Iterator, Sequence

DATABASE_PATH = "data.csv"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class ExchangeError(Exception):
    """Base class for exchange errors."""


class NoDatabaseError(ExchangeError):
    """The rate database could not be opened."""

    def __init__(self, message: str = "Error: could not find database file.") -> None:
        super().__init__(message)


class InvalidFileError(ExchangeError):
    """The input file could not be opened."""

    def __init__(self, message: str = "Error: could not open file.") -> None:
        super().__init__(message)


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _single(value: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _fmt(value: float) -> str:
    return "%g" % value


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(value: str) -> bool:
    """Return whether ``value`` is a YYYY-MM-DD date from 2009 onwards."""
    parts = value.split("-")
    parts += [""] * (3 - len(parts))
    year, month, day = (_leading_int(part) for part in parts[:3])
    if year < 2009 or not 1 <= month <= 12 or day <= 0:
        return False
    limit = 29 if month == 2 and _is_leap(year) else _DAYS_IN_MONTH[month - 1]
    return day <= limit


def check_value(value: float) -> float:
    """Return ``value`` if it lies in [0, 1000], else raise ValueError."""
    if value < 0:
        raise ValueError("Error: not a positive number")
    if value > 1000:
        raise ValueError("Error: too large a number")
    return value


class BitcoinExchange:
    """Exchange rates keyed by date, loaded from a CSV database."""

    def __init__(self, database_path: str | Path = DATABASE_PATH) -> None:
        try:
            with open(database_path, encoding="utf-8", newline="") as handle:
                lines = handle.read().split("\n")
        except OSError as exc:
            raise NoDatabaseError() from exc
        table: dict[str, float] = {}
        for line in lines[1:]:
            pos = line.find(",")
            if pos != -1 and len(line) > pos + 1:
                table[line[:10]] = _single(_leading_float(line[pos + 1:]))
        self._dates = sorted(table)
        self._rates = [table[date] for date in self._dates]

    def rate_for(self, date: str) -> float:
        """Rate on ``date``, or on the closest earlier date in the database.

        Dates before the first entry use the first entry's rate.
        """
        if not self._dates:
            raise LookupError("exchange rate database is empty")
        index = bisect.bisect_left(self._dates, date)
        if index > 0 and (index == len(self._dates) or self._dates[index] != date):
            index -= 1
        return self._rates[index]

    def rates(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield one output line per ``date | value`` input line (no header)."""
        for raw in lines:
            line = raw.rstrip("\n")
            key = line[:10]
            value = _single(_leading_float(line[line.find("|") + 1:]))
            if not is_valid_date(key):
                yield f"Error: bad input => {key}"
                continue
            try:
                check_value(value)
            except ValueError as exc:
                yield str(exc)
                continue
            total = _single(value * self.rate_for(key))
            yield f"{key} => {_fmt(value)} = {_fmt(total)}"

    def show_rates(self, path: str | Path, out: IO[str] | None = None) -> None:
        """Write the converted values for the input file at ``path``."""
        out = sys.stdout if out is None else out
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                lines = handle.read().split("\n")
        except OSError as exc:
            raise InvalidFileError() from exc
        if lines and lines[-1] == "":
            lines.pop()
        for line in self.rates(lines[1:]):
            print(line, file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: convert the values of one input file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("Too many files, input a single valid path!\ntype in btc <path-to-file>")
        return 1
    if not args:
        print("Error: could not open file.")
        return 2
    try:
        BitcoinExchange().show_rates(args[0])
    except ExchangeError as exc:
        print(exc, file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())