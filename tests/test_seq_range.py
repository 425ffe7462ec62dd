import pytest

from from_back.index.errors import BackOffsetUnderflowError
from from_back.index.seq_index import SeqIndex
from from_back.index.seq_range import SeqRange, SeqRangeFrom, SeqRangeInclusive


@pytest.fixture(name="jenny")
def jenny_impl() -> list[int]:
    return [8, 6, 7, 5, 3, 0, 9]


def test_range_front_to_back(jenny: list[int]) -> None:
    rng = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
    assert rng.bounds(len(jenny)) == (2, 4)
    assert rng.resolve(len(jenny)) == slice(2, 4)
    assert jenny[rng.resolve(len(jenny))] == [7, 5]


def test_range_back_to_front_matches_front_to_back(jenny: list[int]) -> None:
    a = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
    b = SeqRange(SeqIndex.from_back(5), SeqIndex.from_front(4))
    assert a.bounds(len(jenny)) == b.bounds(len(jenny)) == (2, 4)


def test_range_back_to_back_end(jenny: list[int]) -> None:
    rng = SeqRange(SeqIndex.from_back(2), SeqIndex.from_back(0))
    assert jenny[rng.resolve(len(jenny))] == [0, 9]


def test_range_default_start() -> None:
    rng = SeqRange(end=SeqIndex.from_back(3))
    assert rng.start == SeqIndex.from_front(0)
    assert rng.bounds(10) == (0, 7)


def test_range_default_is_empty() -> None:
    assert SeqRange() == SeqRange(SeqIndex(), SeqIndex())
    assert SeqRange().bounds(5) == (0, 0)


def test_range_accepts_plain_ints() -> None:
    assert SeqRange(2, SeqIndex.from_back(3)) == SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))


def test_range_inverted_is_not_checked() -> None:
    rng = SeqRange(SeqIndex.from_front(5), SeqIndex.from_front(2))
    assert rng.bounds(7) == (5, 2)
    overlong = SeqRange(SeqIndex.from_front(2), SeqIndex.from_front(50))
    assert overlong.bounds(7) == (2, 50)


def test_range_reports_start_underflow_first() -> None:
    rng = SeqRange(SeqIndex.from_back(9), SeqIndex.from_back(8))
    with pytest.raises(BackOffsetUnderflowError) as exc_info:
        rng.bounds(7)
    assert exc_info.value.offset == 9


def test_range_end_underflow() -> None:
    rng = SeqRange(SeqIndex.from_front(0), SeqIndex.from_back(8))
    with pytest.raises(BackOffsetUnderflowError):
        rng.resolve(7)
    assert rng.checked_bounds(7) is None


def test_range_checked_bounds() -> None:
    assert SeqRange(SeqIndex.from_back(8), SeqIndex.from_front(1)).checked_bounds(7) is None
    assert SeqRange(SeqIndex.from_front(1), SeqIndex.from_back(1)).checked_bounds(7) == (1, 6)


def test_range_from(jenny: list[int]) -> None:
    rng = SeqRangeFrom(SeqIndex.from_back(2))
    assert rng.resolve(len(jenny)) == slice(5, None)
    assert jenny[rng.resolve(len(jenny))] == [0, 9]


def test_range_from_default() -> None:
    assert SeqRangeFrom().resolve(3) == slice(0, None)


def test_range_from_underflow() -> None:
    rng = SeqRangeFrom(SeqIndex.from_back(8))
    with pytest.raises(BackOffsetUnderflowError):
        rng.resolve(7)
    assert rng.checked_resolve(7) is None
    assert SeqRangeFrom(SeqIndex.from_back(7)).checked_resolve(7) == slice(0, None)


def test_range_inclusive(jenny: list[int]) -> None:
    rng = SeqRangeInclusive(SeqIndex.from_front(2), SeqIndex.from_back(2))
    assert rng.bounds(len(jenny)) == (2, 5)
    assert rng.resolve(len(jenny)) == slice(2, 6)
    assert jenny[rng.resolve(len(jenny))] == [7, 5, 3, 0]


def test_range_inclusive_mixed_forms(jenny: list[int]) -> None:
    a = SeqRangeInclusive(SeqIndex.from_front(2), SeqIndex.from_back(3))
    b = SeqRangeInclusive(SeqIndex.from_back(5), SeqIndex.from_front(4))
    assert jenny[a.resolve(len(jenny))] == jenny[b.resolve(len(jenny))] == [7, 5, 3]


def test_range_inclusive_back_one_is_last(jenny: list[int]) -> None:
    rng = SeqRangeInclusive(SeqIndex.from_back(2), SeqIndex.from_back(1))
    assert jenny[rng.resolve(len(jenny))] == [0, 9]


def test_range_inclusive_back_zero_resolves_to_length() -> None:
    rng = SeqRangeInclusive(SeqIndex.from_front(0), SeqIndex.from_back(0))
    assert rng.bounds(7) == (0, 7)
    assert rng.resolve(7) == slice(0, 8)


def test_range_inclusive_default_start() -> None:
    rng = SeqRangeInclusive(end=SeqIndex.from_back(3))
    assert rng.bounds(10) == (0, 7)
    assert list(range(10))[rng.resolve(10)] == [0, 1, 2, 3, 4, 5, 6, 7]


def test_range_inclusive_underflow() -> None:
    rng = SeqRangeInclusive(SeqIndex.from_front(0), SeqIndex.from_back(8))
    with pytest.raises(BackOffsetUnderflowError):
        rng.bounds(7)
    assert rng.checked_bounds(7) is None


def test_resolution_is_pure() -> None:
    rng = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
    first = rng.bounds(7)
    assert rng.bounds(7) == first
    assert rng == SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))


def test_homogeneous_ranges() -> None:
    data = list(range(10))
    ranges = [
        SeqRange(SeqIndex.from_front(2), SeqIndex.from_front(7)),
        SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3)),
        SeqRange(SeqIndex.from_back(8), SeqIndex.from_front(7)),
        SeqRange(SeqIndex.from_back(8), SeqIndex.from_back(3)),
    ]
    for rng in ranges:
        assert data[rng.resolve(len(data))] == [2, 3, 4, 5, 6]


def test_str() -> None:
    assert str(SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))) == "2..^3"
    assert str(SeqRangeFrom(SeqIndex.from_back(2))) == "^2.."
    assert str(SeqRangeInclusive(SeqIndex.from_back(5), SeqIndex.from_front(4))) == "^5..=4"


def test_ranges_are_hashable() -> None:
    a = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
    b = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
    assert hash(a) == hash(b)
    assert SeqRange(1, 2) != SeqRangeInclusive(1, 2)


def test_range_inclusive_checked_bounds() -> None:
    assert SeqRangeInclusive(2, SeqIndex.from_back(2)).checked_bounds(7) == (2, 5)
    assert SeqRangeInclusive(SeqIndex.from_back(7), SeqIndex.from_back(1)).checked_bounds(7) == (0, 6)
