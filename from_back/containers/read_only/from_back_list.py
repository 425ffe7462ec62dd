from collections.abc import Sequence
from typing import TypeVar, Generic, Iterator, cast, overload

from from_back.access.seq_access import seq_get
from from_back.index.seq_index import SeqIndex
from from_back.index.seq_range import SeqRange, SeqRangeFrom, SeqRangeInclusive

T = TypeVar("T")

class FromBackList(Sequence[T], Generic[T]):
    """
    A read-only sequence wrapper whose subscript also accepts from-back offsets and ranges.

    Native `int` and `slice` subscripts behave exactly as they do on the wrapped sequence
    (negative indices included). `SeqIndex`, `SeqRange`, `SeqRangeFrom`,
    `SeqRangeInclusive` and literal strings such as `"2..^3"` are resolved against the
    current length and bounds-checked through `seq_get()`.

    The wrapped sequence is not copied, so later changes to it are visible through the
    wrapper; the wrapper itself offers no way to modify it.

    Attributes:
        _data (Sequence[T]):
            The underlying sequence that this FromBackList wraps.

    Example:
        >>> data = FromBackList([8, 6, 7, 5, 3, 0, 9])
        >>> data[SeqIndex.from_back(2)]
        0
        >>> data["^5..4"]
        [7, 5]
    """

    _data: Sequence[T]

    def __init__(self, data: Sequence[T]):
        self._data = data

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: SeqIndex) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    @overload
    def __getitem__(self, index: SeqRange | SeqRangeFrom | SeqRangeInclusive) -> Sequence[T]: ...

    @overload
    def __getitem__(self, index: str) -> T | Sequence[T]: ...

    def __getitem__(
        self, index: int | slice | str | SeqIndex | SeqRange | SeqRangeFrom | SeqRangeInclusive
    ) -> T | Sequence[T]:
        if isinstance(index, (int, slice)):
            return self._data[index]
        return seq_get(self._data, index)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def count(self, value: T) -> int:
        """
        Returns the number of times the specified value appears in the sequence.

        Args:
            value (T):
                The value to count.

        Returns:
            int:
                Number of occurrences of the value.
        """
        return self._data.count(value)

    def index(self, value: T, start: int | SeqIndex = 0, stop: int | SeqIndex | None = None) -> int:
        """
        Returns the index of the first occurrence of the value.

        `start` and `stop` may be from-back offsets, resolved against the current length.

        Args:
            value (T):
                The value to locate.
            start (int | SeqIndex):
                Optional start index.
            stop (int | SeqIndex | None):
                Optional stop index.

        Returns:
            int:
                Front-relative index of the value.

        Raises:
            ValueError: If the value is not present.
            BackOffsetUnderflowError: If `start` or `stop` is a back offset exceeding the length.
        """
        if isinstance(start, SeqIndex):
            start = start.resolve(len(self._data))
        if stop is None:
            return self._data.index(value, start)
        if isinstance(stop, SeqIndex):
            stop = stop.resolve(len(self._data))
        return self._data.index(value, start, stop)

    def __repr__(self) -> str:
        return f"FromBackList({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FromBackList):
            # Cast is for the type checker only; T is not enforced at runtime, but attribute access
            # is safe for comparison
            return self._data == cast(FromBackList[T], other)._data
        if isinstance(other, Sequence):
            return self._data == other
        return False

    def __contains__(self, item: object) -> bool:
        return item in self._data
