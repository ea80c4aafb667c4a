# wordshift

Two small tools in one package:

- **Wordle helper**: list every dictionary word that fits a pattern of fixed
  letters. Each word must also contain some "floating" letters somewhere.
- **Shift scheduler**: given the days each worker can work, assign a fixed
  number of workers to every day by backtracking. No worker may take more than
  a set number of shifts.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Wordle helper

### Loading a word list

`wordshift.dictionary.read_dict_words(filename)` reads a word list of
whitespace-separated words and returns it as a `frozenset`. The reader skips
these words:

- words that start with an upper-case letter
- words that hold anything other than the letters `a`–`z` and `A`–`Z`

It writes the number of words it accepted to standard error, in the form
`Read N words into dictionary.` If the file cannot be opened, it raises
`OSError`.

### Searching

```python
from wordshift.dictionary import read_dict_words
from wordshift.wordle import wordle

words = read_dict_words("dict-eng.txt")
print(sorted(wordle("s---ng", "ri", words)))
```

`wordle(pattern, floating, dictionary)` returns a `set` of the words in
`dictionary` that meet all of these conditions:

- The word is the same length as `pattern`.
- Every character of `pattern` other than `-` appears at the same position in
  the word.
- Every `-` position holds a lower-case letter `a`–`z`.
- Every character of `floating` appears somewhere in the word. A letter listed
  twice must appear at least twice.

`dictionary` can be any iterable of strings.

### Command line

```
wordshift-wordle s---ng ri
```

The first argument is the pattern. The second argument is the floating
letters and may be left out. The command reads the word list from the file
`dict-eng.txt` in the current directory. It prints the matching words one per
line, in sorted order. If no pattern is given, it prints a usage message and
exits with status 1.

## Shift scheduler

```python
from wordshift.schedwork import schedule, format_schedule

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

`schedule(avail, daily_need, max_shifts)` takes a matrix `avail` with one row
per day and one column per worker. A truthy value means that worker is
available on that day. Workers are identified by their column index.

The function returns a list with one list of worker IDs per day. Each day gets
`daily_need` distinct available workers, and no worker is given more than
`max_shifts` days. It returns `None` when no such assignment exists, or when
`avail` is empty. Workers are tried in order of their ID, so the result is the
first valid assignment found in that order.

`format_schedule(sched)` renders a schedule as text, one line per day, with a
space after each worker ID:

```
Day 0: 0 1 
Day 1: 0 2 
...
```

### Command line

```
wordshift-schedwork
```

This runs the scheduler on the example matrix shown above. It asks for 2
workers a day, with at most 2 shifts each. It prints the schedule, or prints
`No solution found!` when there is none.

## Limitations

- `wordshift-schedwork` always uses its built-in example. It cannot read an
  availability matrix from a file or from the command line, and it has no
  options for the number of workers a day or the shift limit. For other inputs,
  call `schedule` from Python.
- `wordshift-wordle` always reads `dict-eng.txt` from the current directory, and
  no word list is bundled with the package. To use a different file, call
  `read_dict_words` and `wordle` from Python.