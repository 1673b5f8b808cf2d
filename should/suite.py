"""An xUnit-style runner for fixture objects, and the test context it hands them."""

from __future__ import annotations

import os
import threading
import traceback
import types
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .errors import ShouldError

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


@dataclass
class Config:
    """How run executes a fixture."""

    long_running: bool = False
    fresh_fixture: bool = False
    parallel_fixture: bool = False
    parallel_tests: bool = False


Option = Callable[[Config], None]


def long_running() -> Option:
    """Skip the whole fixture when running in short mode."""

    def apply(config: Config) -> None:
        config.long_running = True

    return apply


def fresh_fixture() -> Option:
    """Build a new fixture, by calling its class with no arguments, for every test.

    setup_suite and teardown_suite always run on the fixture given to run.
    """

    def apply(config: Config) -> None:
        config.fresh_fixture = True

    return apply


def shared_fixture() -> Option:
    """Run every test on the given fixture; disables all parallelism."""

    def apply(config: Config) -> None:
        config.fresh_fixture = False
        config.parallel_tests = False
        config.parallel_fixture = False

    return apply


def parallel_fixture() -> Option:
    """Mark the fixture as safe to run alongside other fixtures."""

    def apply(config: Config) -> None:
        config.parallel_fixture = True

    return apply


def parallel_tests() -> Option:
    """Run the tests of the fixture concurrently, each on a fresh fixture."""

    def apply(config: Config) -> None:
        config.parallel_tests = True
        config.fresh_fixture = True

    return apply


def unit_tests() -> Option:
    """Parallel tests on fresh fixtures, to expose coupling between tests."""

    def apply(config: Config) -> None:
        parallel_tests()(config)
        parallel_fixture()(config)

    return apply


def integration_tests() -> Option:
    """A shared fixture without parallelism, skipped in short mode."""

    def apply(config: Config) -> None:
        shared_fixture()(config)
        long_running()(config)

    return apply


class Skipped(Exception):
    """Raised by T.skip to stop the running test."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class T:
    """A test context: collects log lines, failures, skips and subtests."""

    def __init__(self, name: str = "", *, short: bool = False, parent: T | None = None) -> None:
        self.name = name
        self.short = short
        self.parent = parent
        self.failed = False
        self.skipped = False
        self.logs: list[str] = []
        self.subtests: list[T] = []
        self._lock = threading.Lock()

    def so(self, actual, assertion, *args) -> bool:
        """Run an assertion, recording an error if it does not hold."""
        try:
            assertion(actual, *args)
        except ShouldError as err:
            self.error(err)
            return False
        return True

    def log(self, *args) -> None:
        line = " ".join(str(arg) for arg in args)
        with self._lock:
            self.logs.append(line)

    def error(self, *args) -> None:
        self.log(*args)
        self.fail()

    def print(self, *args) -> None:
        self.log(*args)

    def printf(self, fmt: str, *args) -> None:
        self.log(fmt % args if args else fmt)

    def println(self, *args) -> None:
        self.log(*args)

    def write(self, data) -> int:
        text = data.decode() if isinstance(data, (bytes, bytearray)) else str(data)
        self.log(text)
        return len(data)

    def fail(self) -> None:
        """Mark this test, and every test that encloses it, as failed."""
        self.failed = True
        if self.parent is not None:
            self.parent.fail()

    def skip(self, message: str) -> None:
        """Log *message*, mark the test skipped and stop it."""
        self.log(message)
        self.skipped = True
        raise Skipped(message)

    def run(self, name: str, func: Callable[[T], None]) -> bool:
        """Run *func* as a named subtest; return whether it passed."""
        full_name = f"{self.name}/{name}" if self.name else name
        child = T(full_name, short=self.short, parent=self)
        with self._lock:
            self.subtests.append(child)
        try:
            func(child)
        except Skipped:
            pass
        return not child.failed


def so(t: T, actual, assertion, *args) -> None:
    """Run an assertion against the test context *t*."""
    t.so(actual, assertion, *args)


_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def _frame_file(line: str) -> str:
    parts = line.split('"')
    path = parts[1] if len(parts) > 2 else ""
    return os.path.normcase(os.path.abspath(path)) if path else ""


def panic_report(error, stack: str) -> str:
    """Summarise an exception raised by a test, without the runner's own frames."""
    lines = [f"PANIC: {error}", "..."]
    opened = closed = False
    in_runner = False
    for line in stack.splitlines():
        if not opened:
            opened = line.startswith("Traceback")
            continue
        if closed:
            continue
        if not line.startswith(" "):
            closed = True
            continue
        if line.startswith('  File "'):
            in_runner = _frame_file(line) == _THIS_FILE
        if not in_runner:
            lines.append(line)
    return "\n".join(lines).strip()


def _is_niladic(bound) -> bool:
    """Whether *bound* can be called with no arguments and takes none."""
    function = getattr(bound, "__func__", bound)
    code = getattr(function, "__code__", None)
    if code is None:
        return False
    positional = 1 if isinstance(bound, types.MethodType) else 0
    return (
        code.co_argcount == positional
        and code.co_kwonlyargcount == 0
        and not code.co_flags & (_CO_VARARGS | _CO_VARKEYWORDS)
    )


def _classify(fixture) -> tuple[list[str], list[str], list[str]]:
    tests: list[str] = []
    skipped: list[str] = []
    focused: list[str] = []
    for name in sorted(dir(type(fixture))):
        if name.startswith("_"):
            continue
        if not isinstance(getattr(type(fixture), name, None), types.FunctionType):
            continue
        if not _is_niladic(getattr(fixture, name)):
            continue
        if name.startswith(("test", "long_test")):
            tests.append(name)
        elif name.startswith(("skip_long_test", "skip_test")):
            skipped.append(name)
        elif name.startswith(("focus_long_test", "focus_test")):
            focused.append(name)
    return tests, skipped, focused


def _is_long_running(name: str) -> bool:
    return name.startswith(("long", "focus_long"))


def _call_hook(target, name: str) -> None:
    hook = getattr(target, name, None)
    if callable(hook):
        hook()


def _skipper(message: str) -> Callable[[T], None]:
    def body(sub: T) -> None:
        sub.skip(message)

    return body


def _run_test(sub: T, name: str, config: Config, fixture) -> None:
    target = fixture
    previous = getattr(fixture, "t", None)
    try:
        if config.fresh_fixture:
            target = type(fixture)()
        target.t = sub
        _call_hook(target, "setup")
        try:
            getattr(target, name)()
        finally:
            _call_hook(target, "teardown")
    except Skipped:
        raise
    except Exception as err:
        sub.fail()
        sub.log(panic_report(err, traceback.format_exc()))
    finally:
        if target is fixture:
            fixture.t = previous


def _run_case(t: T, name: str, config: Config, fixture) -> None:
    if _is_long_running(name) and t.short:
        t.run(name, _skipper(f"Skipping long-running test in short mode: {name}"))
        return
    t.run(name, lambda sub: _run_test(sub, name, config, fixture))


def run(fixture, *args) -> None:
    """Run the test methods of *fixture*, which holds its T in the attribute t.

    Methods named test*/long_test* run, skip_test*/skip_long_test* are
    reported as skipped, and focus_test*/focus_long_test*, when present,
    replace the normal tests. setup_suite and teardown_suite wrap the
    whole run; setup and teardown wrap every test. The options given in
    *args* adjust the execution.
    """
    config = Config()
    for option in args:
        option(config)

    t: T = fixture.t
    if config.long_running and t.short:
        t.skip("Skipping long-running test in short mode.")

    tests, skipped, focused = _classify(fixture)
    if focused:
        tests = focused
    if not tests:
        t.skip("NOT IMPLEMENTED (no test cases defined, or they are all marked as skipped)")

    _call_hook(fixture, "setup_suite")
    try:
        for name in skipped:
            t.run(name, _skipper(f"Skipping: {name}"))
        if config.parallel_tests:
            with ThreadPoolExecutor() as pool:
                futures = [pool.submit(_run_case, t, name, config, fixture) for name in tests]
                for future in futures:
                    future.result()
        else:
            for name in tests:
                _run_case(t, name, config, fixture)
    finally:
        _call_hook(fixture, "teardown_suite")