"""Producer/consumer printer: one reader feeds work items to consumer threads.

The producer reads ``<count> <word>`` pairs from the input and queues them;
each consumer thread takes items off the queue and prints the word ``count``
times, prefixed by its own thread number.
"""

from __future__ import annotations

import os
import re
import sys
import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from forkcons.linkedlist import LinkedListQueue

_WS = re.compile(r"[ \t\n\v\f\r]*")
_INT = re.compile(r"[+-]?[0-9]+")
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class InputError(Exception):
    """Raised for invalid arguments or malformed input."""


@dataclass(frozen=True)
class DataItem:
    """One unit of work: print ``word`` ``count`` times."""

    count: int
    word: str


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def consumer_count(args: Sequence[str], cores: int) -> int:
    """Number of consumers requested by ``args`` (arguments after the program name).

    No argument means one consumer. A single argument must be an integer from
    1 to ``cores``. More arguments are an error.
    """
    if not args:
        return 1
    if len(args) > 1:
        raise InputError("Error: invalid number of arguments")
    requested = _atoi(args[0])
    if not 0 < requested <= cores:
        raise InputError("Error: invalid number of consuments")
    return requested


def parse_items(text: str) -> Iterator[DataItem]:
    """Yield the ``<count> <word>`` pairs of ``text`` in order.

    Input that is empty or starts with a newline holds no items. Any token
    that does not fit the pattern raises InputError once the items before it
    have been yielded.
    """
    if not text or text[0] == "\n":
        return
    pos = 0
    end = len(text)
    while True:
        pos = _WS.match(text, pos).end()
        if pos == end:
            return
        number = _INT.match(text, pos)
        if number is None:
            raise InputError("Error: scanf failed")
        pos = _WS.match(text, number.end()).end()
        word = _WORD.match(text, pos)
        if word is None:
            raise InputError("Error: scanf failed")
        pos = word.end()
        yield DataItem(int(number.group()), word.group())


def format_item(item: DataItem, thread_id: int) -> str:
    """Line printed by consumer ``thread_id`` for ``item``, without newline.

    Raises InputError when the count is negative or the word starts with a
    nonzero number.
    """
    if _atoi(item.word) != 0 or item.count < 0:
        raise InputError("Error: invalid input")
    return f"Thread {thread_id}:" + f" {item.word}" * item.count


class SharedState:
    """Queue, locks and flags shared by the producer and the consumers."""

    def __init__(self, consumers: int) -> None:
        if consumers < 1:
            raise InputError("Error: invalid number of consuments")
        self.consumers = consumers
        self.queue = LinkedListQueue()
        self.lock = threading.Lock()
        self.write_lock = threading.Lock()
        self.available = threading.Semaphore(0)
        self.terminate = False
        self.cancel = False
        self.failed = False

    def _put(self, item: DataItem) -> None:
        with self.lock:
            self.queue.push(item)
        self.available.release()

    def _take(self) -> DataItem | None:
        """Wait for an item; None once the producer is done and nothing is left."""
        while True:
            self.available.acquire()
            with self.lock:
                if len(self.queue):
                    return self.queue.pop()
                if self.terminate or self.cancel:
                    return None

    def _finish(self, failed: bool) -> None:
        with self.lock:
            self.terminate = True
            if failed:
                self.cancel = True
                self.failed = True

    def _mark_failed(self) -> None:
        with self.lock:
            self.failed = True

    def _wake_all(self) -> None:
        self.available.release(self.consumers)


def _consume(state: SharedState, thread_id: int, out: TextIO) -> None:
    while (item := state._take()) is not None:
        try:
            line = format_item(item, thread_id)
        except InputError as exc:
            sys.stderr.write(f"{exc}\n")
            state._mark_failed()
            continue
        with state.write_lock:
            out.write(line + "\n")


def run(text: str, out: TextIO, consumers: int) -> int:
    """Process ``text`` with ``consumers`` threads writing to ``out``; return exit status."""
    state = SharedState(consumers)
    threads = [
        threading.Thread(target=_consume, args=(state, number, out))
        for number in range(1, consumers + 1)
    ]
    for thread in threads:
        thread.start()
    failed = False
    try:
        for item in parse_items(text):
            state._put(item)
    except InputError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.stderr.write("Error, producer exit\n")
        failed = True
    state._finish(failed)
    state._wake_all()
    for thread in threads:
        thread.join()
    out.flush()
    return 1 if state.failed else 0


def main(argv: list[str] | None = None) -> int:
    """Read standard input and print with the requested number of consumers."""
    args = sys.argv[1:] if argv is None else argv
    try:
        consumers = consumer_count(args, os.cpu_count() or 1)
    except InputError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return run(sys.stdin.read(), sys.stdout, consumers)


if __name__ == "__main__":
    sys.exit(main())