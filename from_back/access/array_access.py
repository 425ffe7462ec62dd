from typing import Any

from numpy.typing import NDArray

from from_back.access.seq_access import IdxKey, to_native_key


def array_get(array: NDArray[Any], key: IdxKey, axis: int = 0) -> Any:
    """
    Index or slice a NumPy array along one axis with an offset or range that may count
    from the back.

    The key is resolved against `array.shape[axis]`. Ranges produce views of `array` (no
    copy); a single offset removes `axis` from the result, exactly as an integer subscript
    would.

    Args:
        array (NDArray[Any]):
            The array to read from. It is never modified.
        key (IdxKey):
            Offset, range, native slice, literal string, or front position.
        axis (int):
            The axis to index along. Negative values count from the last axis.

    Returns:
        Any:
            A view for ranges, or a sub-array / scalar for single offsets.

    Raises:
        IndexError:
            If `axis` is out of range for the array, or the resolved position or range does
            not fit the axis.
        BackOffsetUnderflowError:
            If a back offset exceeds the axis length.

    Example:
        >>> grid = np.arange(12).reshape(3, 4)
        >>> array_get(grid, "1..^1", axis=1)
        array([[ 1,  2],
               [ 5,  6],
               [ 9, 10]])
    """
    if not -array.ndim <= axis < array.ndim:
        raise IndexError(f"axis {axis} is out of bounds for array of dimension {array.ndim}")

    index: list[int | slice] = [slice(None)] * array.ndim
    index[axis] = to_native_key(key, array.shape[axis])
    return array[tuple(index)]

