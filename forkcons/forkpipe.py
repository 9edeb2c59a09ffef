"""Pipe random number pairs from a generator process into a detector process."""

from __future__ import annotations

import argparse
import random
import shlex
import signal
import subprocess
import sys
import time
from typing import Protocol, TextIO

from forkcons.exitcodes import Outcome, ProcessExit, Reason, outcome_for

RUN_TIME = 5.0
GEN_INTERVAL = 1.0
_LIMIT = 4096


class _Stopper(Protocol):
    def is_set(self) -> bool: ...

    def wait(self, timeout: float | None = None) -> bool: ...


def random_pair(rng: random.Random) -> tuple[int, int]:
    """Return two random integers in ``range(4096)``."""
    return rng.randrange(_LIMIT), rng.randrange(_LIMIT)


def generate(out: TextIO, rng: random.Random, interval: float, stop: _Stopper) -> int:
    """Write a pair per line to ``out`` every ``interval`` seconds until stopped.

    Returns the number of lines written.
    """
    written = 0
    while not stop.is_set():
        a, b = random_pair(rng)
        out.write(f"{a} {b}\n")
        out.flush()
        written += 1
        stop.wait(interval)
    return written


def supervise(
    generator: subprocess.Popen,
    detector: subprocess.Popen,
    run_time: float,
) -> Outcome:
    """Let both processes run, stop the generator, and check their statuses.

    Raises ProcessExit when the generator cannot be signalled or when either
    process ends with a nonzero status.
    """
    time.sleep(run_time)
    try:
        generator.send_signal(signal.SIGTERM)
    except OSError as exc:
        raise ProcessExit(Reason.SYS_CALL_FAIL) from exc
    gen_status = generator.wait()
    det_status = detector.wait()
    if gen_status != 0 or det_status != 0:
        raise ProcessExit(Reason.FAILED_CHILD)
    return outcome_for(Reason.CHILD_SUCCESS)


def _emit(outcome: Outcome) -> int:
    stream = sys.stdout if outcome.to_stdout else sys.stderr
    stream.write(outcome.message)
    stream.flush()
    return outcome.code


def _on_sigterm(signum: int, frame: object) -> None:
    raise ProcessExit(Reason.GEN_SIG_TERM)


def _run_generator(interval: float) -> int:
    signal.signal(signal.SIGTERM, _on_sigterm)

    class _Never:
        def is_set(self) -> bool:
            return False

        def wait(self, timeout: float | None = None) -> bool:
            time.sleep(timeout or 0)
            return False

    try:
        generate(sys.stdout, random.Random(), interval, _Never())
    except ProcessExit as exc:
        return _emit(exc.outcome)
    return 0


def _run_parent(run_time: float, interval: float, detector_cmd: list[str]) -> int:
    generator_cmd = [
        sys.executable,
        "-m",
        "forkcons.forkpipe",
        "--generator",
        "--interval",
        str(interval),
    ]
    try:
        try:
            generator = subprocess.Popen(generator_cmd, stdout=subprocess.PIPE)
        except OSError as exc:
            raise ProcessExit(Reason.FAILED_FORK) from exc
        try:
            detector = subprocess.Popen(detector_cmd, stdin=generator.stdout)
        except OSError as exc:
            generator.kill()
            generator.wait()
            raise ProcessExit(Reason.FAILED_FORK) from exc
        generator.stdout.close()
        return _emit(supervise(generator, detector, run_time))
    except ProcessExit as exc:
        return _emit(exc.outcome)


def main(argv: list[str] | None = None) -> int:
    """Start generator and detector, or act as the generator with --generator."""
    parser = argparse.ArgumentParser(prog="forkpipe")
    parser.add_argument("--generator", action="store_true")
    parser.add_argument("--run-time", type=float, default=RUN_TIME)
    parser.add_argument("--interval", type=float, default=GEN_INTERVAL)
    parser.add_argument("--detector", default=None)
    args = parser.parse_args(argv)

    if args.generator:
        return _run_generator(args.interval)
    detector_cmd = (
        shlex.split(args.detector)
        if args.detector
        else [sys.executable, "-m", "forkcons.nsd_main"]
    )
    return _run_parent(args.run_time, args.interval, detector_cmd)


if __name__ == "__main__":
    sys.exit(main())