"""Tests for the per-test allocation arena."""

import pytest

from zest.errors import ArenaError
from zest.runner.arena import Arena, ArenaReport, isolated_arena


class TestArena:
    def test_alloc_and_free(self):
        arena = Arena()
        a = arena.alloc(16, label="buf")
        b = arena.alloc(8)
        assert arena.live == [a, b]

        arena.free(a)

        assert arena.live == [b]
        assert arena.close() == [b]
        assert arena.closed

    def test_double_free(self):
        arena = Arena()
        a = arena.alloc()
        arena.free(a)
        with pytest.raises(ArenaError):
            arena.free(a)

    def test_foreign_free(self):
        a = Arena().alloc()
        with pytest.raises(ArenaError):
            Arena().free(a)

    def test_use_after_close(self):
        arena = Arena()
        arena.close()
        with pytest.raises(ArenaError):
            arena.alloc()

    def test_negative_size(self):
        with pytest.raises(ArenaError):
            Arena().alloc(-1)


class TestIsolatedArena:
    def test_reports_leaks(self):
        report = ArenaReport()
        with isolated_arena(report) as arena:
            arena.alloc(4, label="leaky")
            freed = arena.alloc(4)
            arena.free(freed)

        assert report.has_leaks
        assert [a.label for a in report.leaked] == ["leaky"]
        assert arena.closed

    def test_inspects_on_exception(self):
        report = ArenaReport()
        with pytest.raises(RuntimeError):
            with isolated_arena(report) as arena:
                arena.alloc()
                raise RuntimeError("boom")

        assert len(report.leaked) == 1
        assert arena.closed

    def test_fresh_arena_each_scope(self):
        with isolated_arena() as first:
            first.alloc()
        with isolated_arena() as second:
            assert second.live == []
        assert first is not second

    def test_closed_by_body(self):
        report = ArenaReport()
        with isolated_arena(report) as arena:
            arena.alloc()
            arena.close()
        assert report.leaked == []
