from collections.abc import Sequence
import logging
from typing import TypeVar

from from_back.literal.idx import IdxValue, idx

logger = logging.getLogger(__name__)

T = TypeVar("T")

IdxKey = IdxValue | str | int


def check_native_bounds(native: int | slice, length: int) -> None:
    """
    Apply the bounds check a sequence performs on a concrete position or range.

    Python slicing silently clamps out-of-range bounds, so the accessors run this check on
    every concrete key they derived from an offset or range before indexing. A position must
    satisfy `0 <= pos < length`; a range must satisfy `start <= stop <= length` (an open
    `stop` is `length`).

    Args:
        native (int | slice):
            The resolved position or slice (step is not supported and must be None).
        length (int):
            The length of the sequence about to be indexed.

    Raises:
        IndexError:
            If the position or range does not fit the sequence.
    """
    if isinstance(native, int):
        if native >= length:
            raise IndexError(f"index {native} out of range for sequence of length {length}")
        return

    start = 0 if native.start is None else native.start
    stop = length if native.stop is None else native.stop
    if start > stop:
        raise IndexError(f"range starts at {start} but ends at {stop}")
    if stop > length:
        raise IndexError(f"range end {stop} out of range for sequence of length {length}")


def to_native_key(key: IdxKey, length: int) -> int | slice:
    """
    Turn any supported key into a concrete key for native indexing.

    The key is first built with `idx()`, so literal strings and plain integers are accepted.
    Offsets and ranges are resolved against `length` and bounds-checked with
    `check_native_bounds()`. A native `slice` (e.g. from `idx("..")`) is returned unchanged.

    Args:
        key (IdxKey):
            Offset, range, native slice, literal string, or front position.
        length (int):
            Current length of the sequence.

    Returns:
        int | slice:
            A non-negative position or a step-less slice.

    Raises:
        BackOffsetUnderflowError:
            If a back offset exceeds `length`.
        IndexError:
            If the resolved position or range does not fit the sequence.
        ValueError:
            If a literal string is malformed.
    """
    value = idx(key)
    if isinstance(value, slice):
        return value

    native = value.resolve(length)
    logger.debug("Resolved %s against length %d to %r", value, length, native)
    check_native_bounds(native, length)
    return native


def seq_get(seq: Sequence[T], key: IdxKey) -> T | Sequence[T]:
    """
    Index or slice a sequence with an offset or range that may count from the back.

    Works with any sized sequence supporting integer and slice subscripts: `list`, `tuple`,
    `bytes`, `bytearray`, `range`, 1-D `memoryview` and similar.

    Args:
        seq (Sequence[T]):
            The sequence to read from. It is never modified.
        key (IdxKey):
            Offset, range, native slice, literal string, or front position.

    Returns:
        T | Sequence[T]:
            An element for offsets, or a slice of the same sequence type for ranges.

    Raises:
        BackOffsetUnderflowError:
            If a back offset exceeds the sequence length.
        IndexError:
            If the resolved position or range does not fit the sequence.

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> seq_get(data, SeqIndex.from_back(2))
        0
        >>> seq_get(data, "2..^3")
        [7, 5]
        >>> seq_get(data, "2..=^3")
        [7, 5, 3]
    """
    return seq[to_native_key(key, len(seq))]

