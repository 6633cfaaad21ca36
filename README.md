# toybox

A handful of small command-line programs and the library code behind them.
Each is a short exercise in one idea: parsing input, maps and lists, simple
classes, threads, sockets or asynchronous HTTP.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command             | What it does |
|---------------------|--------------|
| `toybox-bitrange`   | Asks (on standard input) for a bit length of 8, 16 or 32 and for unsigned or signed, then prints the minimum and maximum value. Invalid entries are asked for again; exits with status 1 if input runs out. |
| `toybox-employees`  | Interactive menu: add an employee to a department, or list all departments or one department, names sorted alphabetically. Runs until input ends. |
| `toybox-stats`      | Prints the sorted integers given as arguments (or a built-in sample of twenty) with their median and mode. |
| `toybox-piglatin`   | Prints a sentence (the arguments, or `Hello world into Pig Latin`) and its pig latin form. |
| `toybox-guess`      | Guess a secret number from 0 to 100; each guess is answered "Too small!", "Too big!" or "You win!". |
| `toybox-rectangles` | Prints a few `Rectangle` computations: area and whether one rectangle fits inside another. |
| `toybox-hello`      | Prints `Hello, world!` and `Hello, Macro! My name is Pancakes!`. |
| `toybox-webserver`  | A tiny HTTP server backed by a thread pool. |
| `toybox-pagetitle`  | Fetches two URLs at once and reports the title of whichever answers first. |
| `toybox-minigrep`   | Prints the lines of a file that contain a query string. |

### stats

```
toybox-stats 3 1 2 2
```

`median` averages the two centre values for an even count. For an odd count
above one it returns the sorted value at index `len // 2 - 1`, which is one
position before the centre. `mode` returns every most frequent value, in
ascending order. An empty input to `median` raises `ValueError`.

### piglatin

`word_to_pig_latin("first")` gives `irst-fay`; `word_to_pig_latin("apple")`
gives `apple-hay`. A leading letter is lower-cased. A word whose first
character is not ASCII raises `ValueError`, and the command exits with
status 1.

### minigrep

```
toybox-minigrep to poem.txt
IGNORE_CASE=1 toybox-minigrep to poem.txt
```

Setting `IGNORE_CASE` (to any value) makes the search case-insensitive. A
missing query or file path, or a file that cannot be read, is reported on
standard error and the command exits with status 1.

### webserver

```
toybox-webserver --host 127.0.0.1 --port 7878 --workers 4 --root ./pages
```

It answers `GET / HTTP/1.1` with `hello.html`, `GET /sleep HTTP/1.1` with the
same file after a five-second pause, and any other request line with
`404.html` and status `404 NOT FOUND`. Each connection is handled on a pool
of worker threads. Press Ctrl-C to stop it.

### pagetitle

```
toybox-pagetitle https://example.com https://www.example.com
```

Both pages are requested concurrently; the first to finish wins, the other is
cancelled, and its `<title>` is printed, or a note that no title was found.
A request failure is reported on standard error with status 1.

## Library use

```python
from toybox.bitrange import signed_range, unsigned_range
from toybox.employees import EmployeeDirectory
from toybox.guessing import Verdict, compare_guess
from toybox.minigrep import Config, search, search_case_insensitive
from toybox.piglatin import sentence_to_pig_latin
from toybox.rectangles import Rectangle
from toybox.stats import median, mode
from toybox.threadpool import ThreadPool

signed_range(8)      # (-128, 127)
unsigned_range(16)   # (0, 65535)

search("duct", "Rust:\nsafe, fast, productive.\nPick three.")
# ['safe, fast, productive.']

compare_guess(10, 42)   # Verdict.TOO_SMALL

directory = EmployeeDirectory()
directory.add("Sally", "Engineering")
directory.employees("Engineering")   # ['Sally']

Rectangle.square(3).area()   # 9

with ThreadPool(4) as pool:
    pool.execute(lambda: print("working"))
```

`ThreadPool` requires a positive size. When the `with` block ends, or
`shutdown()` is called, it stops taking jobs, runs those already queued and
joins its workers; `execute` after that raises `RuntimeError`. An exception in
a job is printed and the worker carries on.

## What it does not do

- `toybox-webserver` ships no pages: put `hello.html` and `404.html` in the
  directory given by `--root`. If a file is missing, that connection fails.
- `toybox-employees` keeps its directory in memory only; nothing is saved
  when it exits.
- `toybox-pagetitle` finds the title with a simple pattern match, not a full
  HTML parser.