from __future__ import annotations
from dataclasses import dataclass

from from_back.index.seq_index import SeqIndex, as_seq_index


def _checked_pair(start: SeqIndex, end: SeqIndex, length: int) -> tuple[int, int] | None:
    if (start_pos := start.checked_resolve(length)) is None:
        return None
    if (end_pos := end.checked_resolve(length)) is None:
        return None
    return start_pos, end_pos


def _resolve_pair(start: SeqIndex, end: SeqIndex, length: int) -> tuple[int, int]:
    # start first, so the first failing bound is the one reported
    return start.resolve(length), end.resolve(length)


@dataclass(frozen=True)
class SeqRange:
    """
    A half-open range `[start, end)` whose bounds may count from either end of a sequence.

    This is the from-back counterpart of a plain `slice(start, end)`. Resolution only
    detects back-offset underflow; an inverted range (`start > end`) or one running past
    the sequence is left to the sequence being indexed, just as `slice(5, 2)` is valid until
    it is applied.

    Attributes:
        start (SeqIndex):
            Lower bound (inclusive). Defaults to `SeqIndex.from_front(0)`.

        end (SeqIndex):
            Upper bound (exclusive).

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> rng = SeqRange(SeqIndex.from_front(2), SeqIndex.from_back(3))
        >>> rng.bounds(len(data))
        (2, 4)
        >>> data[rng.resolve(len(data))]
        [7, 5]
    """
    start: SeqIndex = SeqIndex()
    end: SeqIndex = SeqIndex()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_seq_index(self.start))
        object.__setattr__(self, "end", as_seq_index(self.end))

    def checked_bounds(self, length: int) -> tuple[int, int] | None:
        """
        Resolve both bounds, returning None if either back offset underflows.
        """
        return _checked_pair(self.start, self.end, length)

    def bounds(self, length: int) -> tuple[int, int]:
        """
        Resolve both bounds to concrete front-relative positions.

        Args:
            length (int):
                Current length of the sequence.

        Returns:
            tuple[int, int]:
                `(start, end)` with `end` exclusive.

        Raises:
            BackOffsetUnderflowError:
                If either bound is a back offset exceeding `length`; `start` is checked first.
        """
        return _resolve_pair(self.start, self.end, length)

    def resolve(self, length: int) -> slice:
        """
        Resolve to the native half-open form `slice(start, end)`.

        Raises:
            BackOffsetUnderflowError:
                If either bound is a back offset exceeding `length`.
        """
        start, end = self.bounds(length)
        return slice(start, end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class SeqRangeFrom:
    """
    A range starting at `start` and running to the end of the sequence.

    Attributes:
        start (SeqIndex):
            Lower bound (inclusive). Defaults to `SeqIndex.from_front(0)`.

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> data[SeqRangeFrom(SeqIndex.from_back(2)).resolve(len(data))]
        [0, 9]
    """
    start: SeqIndex = SeqIndex()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_seq_index(self.start))

    def checked_resolve(self, length: int) -> slice | None:
        """
        Resolve to `slice(start, None)`, or None if `start` underflows.
        """
        if (start := self.start.checked_resolve(length)) is None:
            return None
        return slice(start, None)

    def resolve(self, length: int) -> slice:
        """
        Resolve to the native open-ended form `slice(start, None)`.

        Args:
            length (int):
                Current length of the sequence.

        Returns:
            slice:
                The open-ended slice.

        Raises:
            BackOffsetUnderflowError:
                If `start` is a back offset exceeding `length`.
        """
        return slice(self.start.resolve(length), None)

    def __str__(self) -> str:
        return f"{self.start}.."


@dataclass(frozen=True)
class SeqRangeInclusive:
    """
    A closed range `[start, end]` whose bounds may count from either end of a sequence.

    Both bounds resolve exactly like the bounds of `SeqRange`; only the interpretation of
    `end` differs. `from_back(n)` as an inclusive end names position `length - n` and that
    position is included, so `from_back(1)` is the last element and `from_back(0)` is one
    past it (an out-of-range end once applied to the sequence).

    Attributes:
        start (SeqIndex):
            Lower bound (inclusive). Defaults to `SeqIndex.from_front(0)`.

        end (SeqIndex):
            Upper bound (inclusive).

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> rng = SeqRangeInclusive(SeqIndex.from_front(2), SeqIndex.from_back(2))
        >>> rng.bounds(len(data))
        (2, 5)
        >>> data[rng.resolve(len(data))]
        [7, 5, 3, 0]
    """
    start: SeqIndex = SeqIndex()
    end: SeqIndex = SeqIndex()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_seq_index(self.start))
        object.__setattr__(self, "end", as_seq_index(self.end))

    def checked_bounds(self, length: int) -> tuple[int, int] | None:
        """
        Resolve both bounds, returning None if either back offset underflows.
        """
        return _checked_pair(self.start, self.end, length)

    def bounds(self, length: int) -> tuple[int, int]:
        """
        Resolve both bounds to concrete front-relative positions.

        Args:
            length (int):
                Current length of the sequence.

        Returns:
            tuple[int, int]:
                `(start, end)` with `end` inclusive.

        Raises:
            BackOffsetUnderflowError:
                If either bound is a back offset exceeding `length`; `start` is checked first.
        """
        return _resolve_pair(self.start, self.end, length)

    def resolve(self, length: int) -> slice:
        """
        Resolve to the equivalent native half-open form `slice(start, end + 1)`.

        Raises:
            BackOffsetUnderflowError:
                If either bound is a back offset exceeding `length`.
        """
        start, end = self.bounds(length)
        return slice(start, end + 1)

    def __str__(self) -> str:
        return f"{self.start}..={self.end}"


SeqRangeLike = SeqRange | SeqRangeFrom | SeqRangeInclusive
