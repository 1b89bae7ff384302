"""Sample suite showing zest's output.

Run with ``zest demo/sample_suite.py``. It includes a deliberate failure
and a skip, so the run exits non-zero.
"""

import zest

setup_count = 0
teardown_count = 0


@zest.before_all
def reset_counters():
    global setup_count, teardown_count
    setup_count = 0
    teardown_count = 0


@zest.after_all
def check_counters():
    # beforeEach and afterEach ran once for each regular test.
    assert setup_count == 5
    assert teardown_count == 5


@zest.before_each
def count_setup():
    global setup_count
    setup_count += 1


@zest.after_each
def count_teardown():
    global teardown_count
    teardown_count += 1


@zest.test("addition")
def addition():
    assert 2 + 2 == 4


@zest.test("string equality")
def string_equality():
    assert "hello" == "hello"


@zest.test("deliberate failure")
def deliberate_failure():
    assert 2 + 2 == 5


@zest.test("skip example")
def skip_example():
    raise zest.SkipTest()


@zest.test("slice contains")
def slice_contains(arena):
    haystack = [1, 2, 3, 4, 5]
    buf = arena.alloc(len(haystack), label="haystack")
    assert 3 in haystack
    arena.free(buf)
