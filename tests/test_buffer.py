from __future__ import annotations

from dataclasses import dataclass

import pytest

from relay_backend.buffer import BoundedLog, IdGenerator


@dataclass(frozen=True)
class Item:
    id: int


def _filled(capacity: int, count: int) -> BoundedLog[Item]:
    log: BoundedLog[Item] = BoundedLog(capacity)
    for i in range(1, count + 1):
        log.append(Item(i))
    return log


def test_append_beyond_capacity_keeps_most_recent_newest_first():
    log = _filled(3, 5)
    assert len(log) == 3
    assert [item.id for item in log] == [5, 4, 3]


def test_evicted_entries_are_not_found():
    log = _filled(3, 5)
    assert log.get_by_id(1) is None
    assert log.get_by_id(2) is None
    assert log.get_by_id(3) == Item(3)
    assert log.get_by_id(5) == Item(5)


@pytest.mark.parametrize(
    "offset, limit, expected",
    [
        (0, 2, [10, 9]),
        (2, 3, [8, 7, 6]),
        (8, 5, [2, 1]),
        (10, 5, []),
        (0, 100, list(range(10, 0, -1))),
    ],
)
def test_page_returns_contiguous_slice_and_total(offset, limit, expected):
    log = _filled(20, 10)
    page = log.page(offset, limit)
    assert [item.id for item in page.items] == expected
    assert page.total == 10


def test_clear_reports_prior_count_and_empties():
    log = _filled(5, 4)
    assert log.clear() == 4
    assert len(log) == 0
    assert log.page(0, 10).items == []
    assert log.get_by_id(4) is None
    assert log.clear() == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BoundedLog(0)


def test_entries_without_id_are_stored_but_not_indexed():
    log: BoundedLog[str] = BoundedLog(2)
    log.append("a")
    log.append("b")
    log.append("c")
    assert log.snapshot() == ["c", "b"]


def test_id_generator_is_strictly_increasing(monkeypatch):
    monkeypatch.setattr("relay_backend.buffer.time.time", lambda: 1700000000.0)
    new_id = IdGenerator()
    ids = [new_id() for _ in range(5)]
    assert ids == [1700000000000 + i for i in range(5)]
