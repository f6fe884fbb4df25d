"""Tests for RequestSequencer."""

from corpdash.pipeline.staleness import RequestSequencer


class TestRequestSequencer:
    def test_starts_at_zero(self) -> None:
        assert RequestSequencer().latest == 0

    def test_issue_is_monotonic(self) -> None:
        seq = RequestSequencer()
        issued = [seq.issue() for _ in range(5)]
        assert issued == [1, 2, 3, 4, 5]
        assert seq.latest == 5

    def test_latest_is_current(self) -> None:
        seq = RequestSequencer()
        req = seq.issue()
        assert seq.is_current(req) is True

    def test_superseded_is_stale(self) -> None:
        seq = RequestSequencer()
        first = seq.issue()
        second = seq.issue()
        assert seq.is_current(first) is False
        assert seq.is_current(second) is True

    def test_independent_instances(self) -> None:
        a, b = RequestSequencer(), RequestSequencer()
        a.issue()
        a.issue()
        assert b.issue() == 1
