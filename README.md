# should

Small, composable assertion functions and an xUnit-style fixture runner,
with a bowling score calculator (`should.bowling.Game`) as a worked example.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

## Assertions

Every assertion is a plain function, `assertion(actual, *expected)`. It
returns `None` when it passes. Otherwise it raises a subclass of
`should.errors.ShouldError`:

- `AssertionFailure` (also an `AssertionError`): the values did not meet the
  expectation. Its message includes the frames of the calling test files.
- `ExpectedCountInvalid`: the wrong number of expected values was given.
- `TypeMismatch`: a value has a type the assertion cannot work with.
- `KindMismatch`: a value is not of a kind the assertion accepts (a
  container, a string, an integer, and so on).

```python
from should.equal import equal
from should.ordering import be_less_than, be_greater_than_or_equal_to
from should.containers import contain, start_with, end_with, have_length, be_empty
from should.basics import be_true, be_nil, panic, wrap_error, be_chronological
from should.times import happen_before, happen_within

equal(1, 1)
equal(1, 1.0)                 # numbers compare by value
be_less_than("a", "b")
be_greater_than_or_equal_to(2, 2.0)
contain("integrate", "rat")   # substring
contain({"a": 1}, "a")        # mapping key
start_with([1, 2, 3], 1)
end_with("abc", "bc")
have_length({"a": 1}, 1)
be_empty("")
be_true(True)
be_nil(None)
panic(lambda: 1 / 0)          # passes: the callable raised
```

What each module offers:

- `should.equal`: `equal`, `not_equal`, and `report`, which builds the
  expected/actual diff shown when `equal` fails. Numbers (`int` and `float`,
  but not `bool`) compare by value; datetimes compare with `==`, so the same
  instant in two time zones is equal; any other pair must share a type and
  compare equal.
- `should.ordering`: `be_less_than`, `be_greater_than`,
  `be_less_than_or_equal_to`, `be_greater_than_or_equal_to` and their `not_`
  forms. Both values must be strings, numbers or datetimes, otherwise
  `TypeMismatch` is raised.
- `should.containers`: `contain`, `not_contain`, `be_in`, `not_be_in`,
  `start_with`, `end_with`, `be_empty`, `not_be_empty`, `have_length`.
  Strings are searched by substring, mappings by key, other containers by
  member (compared with `equal`). `be_empty` and `have_length` also accept a
  `queue.Queue`, measured by its `qsize()`.
- `should.basics`: `be_true`, `be_false`, `be_nil`, `not_be_nil`,
  `be_chronological`, `not_be_chronological` (a list or tuple of datetimes),
  `panic`, `not_panic` (call a no-argument callable and check whether it
  raises), and `wrap_error`, which checks that an exception is, or is linked
  through its `__cause__`, `__context__` or exception-group members to, the
  expected exception object.
- `should.times`: `happen_after`, `happen_before`, `happen_on`,
  `not_happen_on`, and `happen_within(actual, tolerance, target)` where
  `tolerance` is a `timedelta`.
- `should.errors`: the error classes, the `Kind` enumeration with `kind_of`,
  and the validation helpers the assertions share.

### Negated assertions

Besides the `not_` functions, the negated forms are grouped under
`should.negation.NOT`, an instance of `Negated`:

```python
from should.negation import NOT

NOT.equal(1, 2)
NOT.contain([1, 2, 3], 4)
NOT.be_empty("text")
NOT.panic(lambda: None)
```

## Using assertions in tests

`should.suite.T` is a test context. Its `so` method runs an assertion; if it
raises any `ShouldError`, the error is logged, the context is marked failed,
and `so` returns `False` instead of raising. The module-level
`so(t, actual, assertion, *expected)` does the same for a given `T`.

```python
from should.suite import T
from should.equal import equal

t = T()
assert t.so(1, equal, 1)
assert not t.so(1, equal, 2)
assert t.failed
```

A `T` keeps its state in plain attributes: `failed`, `skipped`, `logs` and
`subtests`. `T(short=True)` puts it in short mode.

## Fixture suites

`run(fixture, *options)` runs the test methods of a fixture object whose
attribute `t` holds a `T`:

1. `setup_suite()`
2. `setup()`, the test method, `teardown()`, once for each test
3. `teardown_suite()`

Every hook is optional. Each test runs as a subtest of `fixture.t`, and the
test's own `T` is set as the fixture's `t` while it runs. Only public methods
that take no arguments are considered, in alphabetical order:

- `test*` and `long_test*` run.
- `skip_test*` and `skip_long_test*` are recorded as skipped subtests.
- `focus_test*` and `focus_long_test*`: when any exist, only these run.

In short mode, `long_test*` and `focus_long_test*` methods are skipped. If a
suite has nothing to run, `run` marks `fixture.t` skipped and raises
`should.suite.Skipped` without calling any hook.

Options adjust a `Config`:

- `long_running()`: skip the whole suite (raising `Skipped`) in short mode.
- `fresh_fixture()`: build a new fixture for every test by calling its class
  with no arguments; `setup_suite` and `teardown_suite` still run on the
  fixture given to `run`.
- `shared_fixture()`: run every test on the given fixture, turning the other
  options off.
- `parallel_fixture()`: sets `Config.parallel_fixture`; `run` itself does
  not act on it.
- `parallel_tests()`: run the tests on a thread pool, each on a fresh fixture.
- `unit_tests()`: `parallel_tests()` plus `parallel_fixture()`.
- `integration_tests()`: `shared_fixture()` plus `long_running()`.

```python
from should.suite import T, run, unit_tests
from should.equal import equal
from should.bowling import Game


class GameFixture:
    t = None

    def setup(self):
        self.game = Game()

    def test_gutter_game(self):
        for _ in range(20):
            self.game.record_roll(0)
        self.t.so(self.game.calculate_score(), equal, 0)

    def test_perfect_game(self):
        for _ in range(12):
            self.game.record_roll(10)
        self.t.so(self.game.calculate_score(), equal, 300)


fixture = GameFixture()
fixture.t = T()
run(fixture, unit_tests())
assert not fixture.t.failed
```

When a test method raises, its subtest is marked failed and its log holds a
report from `panic_report`: the error followed by the traceback frames that
belong to the test code, not to the runner.

## What it does not do

`should` is a library only. It has no command-line program and no pytest
plugin: `run` records results in `T` objects, and it is up to the caller to
inspect `failed`, `skipped` and `logs` or to turn them into a test outcome.