# forkcons

A handful of small command-line tools built around processes, pipes and
threads, plus the helpers they rely on.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `forkcons-nsd`

Reads lines from standard input. Each line that starts with two integers
produces one line on standard output: either

```
Both 7 and 13 are prime
```

when both numbers are prime, or

```
nsd(12, 18) = 6
```

with their greatest common divisor otherwise. Text after the second
integer is ignored. Lines that do not start with two integers are reported
on standard error as `Invalid input: ...`; lines longer than 255
characters are handled in pieces of that length. When the input ends,
`NSD DONE` is written to standard error and the exit status is 0.
Command-line arguments are ignored.

```
printf '12 18\n7 13\n' | forkcons-nsd
```

### `forkcons-forkpipe`

Starts a generator process that writes a pair of random numbers below
4096 at a fixed interval, and pipes its output into a detector process.
After the run time the generator is sent SIGTERM (it writes
`GEN TERMINATED` to standard error and exits with status 0), both
processes are waited for, and the command prints `OK` and exits with
status 0 if both ended with status 0, or prints `ERROR` and exits with
status 1 otherwise. If a process cannot be started or signalled, the exit
status is 2.

Options:

- `--run-time SECONDS` — how long to let the pipeline run (default 5).
- `--interval SECONDS` — time between generated pairs (default 1).
- `--detector COMMAND` — the command that reads the pairs; it is split
  with shell-like rules. By default it is `forkcons.nsd_main` run with the
  current Python interpreter.
- `--generator` — act as the generator itself instead of starting the
  pipeline; used internally.

```
forkcons-forkpipe
forkcons-forkpipe --run-time 3 --interval 0.5
```

### `forkcons-prodcons`

A producer-consumer printer. The producer reads whitespace-separated pairs
`count word` from standard input and queues them; a pool of consumer
threads takes the items and each prints one line

```
Thread 1: word word word
```

with its own thread number (starting at 1) and the word repeated `count`
times. Which thread prints which item depends on scheduling.

The optional single argument sets the number of consumers; it must be an
integer between 1 and the number of processor cores (default 1). A
different value, or more than one argument, is an error with exit status
1. Input that is empty or starts with a newline holds no items. Malformed
input stops the producer; an item with a negative count or a word that
starts with a nonzero number is reported and skipped. In any of these
cases the exit status is 1.

```
printf '3 hello\n2 world\n' | forkcons-prodcons 2
```

## Library use

The building blocks are importable as well:

- `forkcons.divisors` — `nd(a)` (largest proper divisor by trial
  division, 1 for primes) and `nsd(a, b)` (greatest common divisor).
- `forkcons.nsd_main` — `parse_pair`, `describe_pair` and `run` for the
  detector's line handling.
- `forkcons.linkedlist` — `LinkedList` (`append`, `remove_first`,
  `remove_last`, `remove_at`, `len()` and iteration) and the FIFO
  `LinkedListQueue` (`push`, `pop`, `len()`); removing from an empty
  structure raises `IndexError`.
- `forkcons.exitcodes` — `Reason`, `Outcome`, `outcome_for` and the
  `ProcessExit` exception that carries an exit status and message.
- `forkcons.forkpipe` — `random_pair`, `generate` and `supervise`.
- `forkcons.prodcons` — `DataItem`, `InputError`, `SharedState`,
  `consumer_count`, `parse_items`, `format_item` and `run`.

```python
from forkcons.divisors import nsd
from forkcons.nsd_main import describe_pair
from forkcons.prodcons import DataItem, format_item

nsd(12, 18)                              # 6
describe_pair(7, 13)                     # "Both 7 and 13 are prime"
format_item(DataItem(2, "hi"), 1)        # "Thread 1: hi hi"
```