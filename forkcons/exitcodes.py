"""Exit reasons of the generator/detector supervisor and what each one prints."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Reason(enum.IntEnum):
    """Why a process of the pipeline is finishing."""

    CHILD_SUCCESS = 0
    SYS_CALL_FAIL = 2
    FAILED_PIPE = 100
    FAILED_FORK = 101
    FAILED_CHILD = 102
    GEN_SIG_TERM = 103


@dataclass(frozen=True)
class Outcome:
    """Exit status, the message to print and whether it goes to stdout."""

    code: int
    message: str
    to_stdout: bool


_OUTCOMES = {
    Reason.SYS_CALL_FAIL: Outcome(2, "", False),
    Reason.FAILED_PIPE: Outcome(2, "", False),
    Reason.FAILED_FORK: Outcome(2, "", False),
    Reason.FAILED_CHILD: Outcome(1, "ERROR\n", True),
    Reason.CHILD_SUCCESS: Outcome(0, "OK\n", True),
    Reason.GEN_SIG_TERM: Outcome(0, "GEN TERMINATED\n", False),
}

_UNKNOWN = Outcome(-1, "Error: unknown error\n", False)


def outcome_for(reason: Reason | int) -> Outcome:
    """Return the outcome for ``reason``; unknown codes get a generic error."""
    try:
        return _OUTCOMES[Reason(reason)]
    except ValueError:
        return _UNKNOWN


class ProcessExit(SystemExit):
    """Request to end the current process for a given reason."""

    def __init__(self, reason: Reason | int) -> None:
        self.reason = reason
        self.outcome = outcome_for(reason)
        super().__init__(self.outcome.code)