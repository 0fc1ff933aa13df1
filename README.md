# ninetools

Three small command-line tools:

- `btc` looks up bitcoin values against a table of exchange rates.
- `rpn` is a reverse Polish notation calculator.
- `pmergeme` sorts numbers with merge-insertion sort.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## btc: bitcoin value lookup

`btc` reads exchange rates from `data.csv` in the current directory. Each line
of that file has the form `date,exchange_rate`. It then reads an input file of
`date | value` lines. The first line of each file is a header and is skipped.

```
btc input.txt
```

For each input line, `btc` prints the value multiplied by the rate on that
date. If the table has no rate for that date, it uses the rate of the closest
earlier date. Dates before the first entry use the first entry's rate.

```
2011-01-03 => 3 = 0.9
```

Each input line is checked. If a check fails, `btc` prints an error line and
moves on to the next input line:

- The date must be a valid `YYYY-MM-DD` date, 2009 or later. Leap years are
  taken into account. A bad date prints `Error: bad input => <date>`.
- A negative value prints `Error: not a positive number`.
- A value above 1000 prints `Error: too large a number`.

Exit codes:

| Code | Meaning |
| ---- | ------- |
| 0 | Success |
| 1 | More than one argument was given |
| 2 | No argument was given. `btc` prints `Error: could not open file.` |
| 3 | `data.csv` or the input file could not be opened. The message goes to standard error. |

Library use:

```python
from ninetools.bitcoin_exchange import BitcoinExchange, is_valid_date, check_value

exchange = BitcoinExchange("data.csv")
print(exchange.rate_for("2011-01-03"))
for line in exchange.rates(["2011-01-03 | 3"]):
    print(line)
exchange.show_rates("input.txt")        # writes to sys.stdout by default
```

- `BitcoinExchange(database_path)` raises `NoDatabaseError` if the database
  cannot be opened. `database_path` defaults to `data.csv`.
- `show_rates(path, out)` raises `InvalidFileError` if the input file cannot be
  opened.
- Both errors derive from `ExchangeError`.
- `rate_for` raises `LookupError` when the database has no entries.
- `check_value` returns its argument, or raises `ValueError` with the messages
  listed above.

## rpn: reverse Polish notation calculator

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
42
```

Tokens are separated by spaces. Each operand must be a single digit from 0 to 9.
The operators are `+ - * /`. Division truncates toward zero.

If the expression is malformed, `rpn` prints `Error` to standard error and exits
with code 3. It does the same on division by zero. With no argument it exits
with code 2 and prints nothing. With more than one argument it exits with code 1.

Library use:

```python
from ninetools.rpn import evaluate, WrongFormatError, ImpossibleExpressionError

assert evaluate("1 2 * 2 / 2 * 2 4 - +") == 0
```

`evaluate` raises `WrongFormatError` for a malformed expression. It raises
`ImpossibleExpressionError` for division by zero. Both derive from `RPNError`.

## pmergeme: merge-insertion sort

```
pmergeme 3 5 9 7 4
Before:  3 5 9 7 4
After:   3 4 5 7 9
Time to process a range of 5 elements with list :  ...us
Time to process a range of 5 elements with deque :  ...us
```

`pmergeme` sorts its arguments with the Ford–Johnson merge-insertion algorithm.
It runs the sort twice, once on a list and once on a deque, and reports the time
each run took in microseconds.

If any argument is negative or appears more than once, `pmergeme` prints `Error`
to standard error and exits with code 3. With no arguments it prints a usage
message and exits with code 1.

Library use:

```python
from collections import deque
from ninetools.pmerge import merge_insert_sort, parse_arguments, jacobsthal

assert merge_insert_sort([3, 5, 9, 7, 4]) == [3, 4, 5, 7, 9]
assert merge_insert_sort(deque([2, 1])) == deque([1, 2])
assert parse_arguments(["3", "1"]) == [3, 1]
assert jacobsthal(10) == [1, 3, 5, 11]
```

- `merge_insert_sort` returns a deque when it is given a deque. For any other
  input it returns a list.
- `parse_arguments` raises `NegativeElementError` or `DuplicateElementError`.
  Both derive from `PmergeError`.