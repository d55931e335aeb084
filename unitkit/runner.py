"""A minimal unit-test runner that reports each test as OK, KO or crashed.

A test is a callable taking no arguments. It passes when it returns 0 and
fails when it returns anything else. A test that is stopped by a signal is
reported by that signal. A test that lets an exception escape is reported as
a segmentation fault, the way an invalid access brings a test down.
"""

from __future__ import annotations

import signal
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

TestFunc = Callable[[], object]


class Outcome(Enum):
    """The result of running one test, valued by the label printed for it."""

    OK = "[OK]\n"
    KO = "[KO]\n"
    SEGV = "[SIGSEV]\n"
    BUS = "[SIGBUS]\n"
    UNKNOWN_SIGNAL = "[UNKNOWN SIGNAL]"

    @property
    def label(self) -> str:
        """The text written after the test's name."""
        return self.value

    @property
    def passed(self) -> bool:
        """True only for a test that succeeded."""
        return self is Outcome.OK


@dataclass(frozen=True)
class UnitTest:
    """A named test function."""

    name: str
    func: TestFunc


_TRAPPED_SIGNALS = tuple(
    sig
    for sig in (getattr(signal, name, None) for name in ("SIGSEGV", "SIGBUS", "SIGFPE", "SIGILL", "SIGABRT"))
    if sig is not None
)


class _Signalled(Exception):
    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def _raise_signalled(signum, frame) -> None:
    raise _Signalled(signum)


@contextmanager
def _trap_signals() -> Iterator[None]:
    """Turn fatal signals delivered while the block runs into exceptions."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = {}
    try:
        for sig in _TRAPPED_SIGNALS:
            previous[sig] = signal.signal(sig, _raise_signalled)
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)


def _from_signal(signum: int) -> Outcome:
    if signum == signal.SIGSEGV:
        return Outcome.SEGV
    if signum == getattr(signal, "SIGBUS", None):
        return Outcome.BUS
    return Outcome.UNKNOWN_SIGNAL


def _execute(func: TestFunc) -> Outcome:
    with _trap_signals():
        try:
            result = func()
        except _Signalled as exc:
            return _from_signal(exc.signum)
        except Exception:
            return Outcome.SEGV
    return Outcome.OK if result == 0 else Outcome.KO


def display_score(success_count: int, total_count: int) -> None:
    """Write the ``passed/total tests checked`` summary to standard output."""
    if success_count < 0 or total_count < 0:
        raise ValueError("counts must be non-negative")
    sys.stdout.write(f"{success_count}/{total_count} tests checked\n\n")


@dataclass
class TestSuite:
    """An ordered list of tests that are run together."""

    __test__ = False

    tests: list[UnitTest] = field(default_factory=list)

    def load(self, name: str, func: TestFunc) -> None:
        """Append a test to the end of the suite."""
        self.tests.append(UnitTest(name, func))

    def launch(self) -> list[Outcome]:
        """Run every test in order, print the results and empty the suite.

        Returns the outcome of each test, in the order they were loaded.
        """
        outcomes = []
        for test in self.tests:
            sys.stdout.write(f"{test.name} : ")
            sys.stdout.flush()
            outcome = _execute(test.func)
            sys.stdout.write(outcome.label)
            outcomes.append(outcome)
        self.tests.clear()
        display_score(sum(outcome.passed for outcome in outcomes), len(outcomes))
        return outcomes