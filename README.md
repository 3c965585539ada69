# wordsched

Two small backtracking solvers:

- **Wordle helper**: given a pattern of known letters and blanks, plus the
  letters known to appear somewhere in the blanks, list every dictionary word
  that fits.
- **Shift scheduler**: given which workers are available on which days, how
  many workers each day needs, and the most shifts any one worker may take,
  find a schedule that satisfies every constraint.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Wordle helper

Write the pattern with known letters in place and `-` for every unknown
position. Letters that must fill some of the unknown positions ("floating"
letters) are passed as an optional second argument.

```
wordsched-wordle s---ng
wordsched-wordle -i-- dn
```

Run without arguments, the command prints a usage hint and exits with
status 1.

The words are read from a file named `dict-eng.txt` in the current
directory, taking every whitespace-separated token. Tokens that start with a
capital letter, or that hold anything other than ASCII letters, are skipped.
The number of words read is reported on standard error. Every matching word
is printed on its own line, in alphabetical order.

From Python:

```python
from wordsched.dictionary import parse_dict_words, read_dict_words
from wordsched.wordle import wordle

words = parse_dict_words(["dine", "dint", "find", "kind", "mind"])
print(sorted(wordle("-i--", "dn", words)))
```

`parse_dict_words(lines)` builds a frozen set of words from any iterable of
lines, applying the same filtering. `read_dict_words(filename)` loads such a
set from a file, caching it per path; it raises `OSError` if the file cannot
be opened. `wordle(pattern, floating, dictionary)` returns a set of the
matching words.

## Shift scheduler

```
wordsched-schedwork
```

runs the scheduler on a built-in sample availability matrix (four days, four
workers, two workers a day, at most two shifts each) and prints the schedule
one day per line, as `Day N: ` followed by the worker IDs, or
`No solution found!` when none exists.

From Python:

```python
from wordsched.schedwork import format_schedule, schedule

avail = [
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 0, 1],
]
sched = schedule(avail, 2, 2)
if sched is not None:
    print(format_schedule(sched), end="")
```

Rows of the availability matrix are days and columns are workers; a truthy
entry means that worker can work that day. `schedule` returns, for each day,
the IDs (column indices) of the workers assigned to it, or `None` when no
schedule exists or the matrix is empty. Workers are tried in order of ID, so
the first schedule found is returned.

## What it does not do

The `wordsched-schedwork` command takes no input: it always solves the
built-in sample. To schedule your own availability matrix, call `schedule`
from Python. The dictionary file name used by `wordsched-wordle` is fixed to
`dict-eng.txt`, and no dictionary file is shipped with the package.