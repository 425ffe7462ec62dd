import operator


def _format_type_name(value: object) -> str:
    """
    Helper to format type names nicely for error messages.
    """
    return type(value).__name__

def index_cast(value: object, what: str = "index") -> int:
    """
    Convert a value to a non-negative plain `int` suitable for use as an offset or length.

    Anything implementing `__index__` (e.g., `int`, `numpy.int64`) is accepted and
    normalised to a builtin `int`. `bool` is rejected even though it implements
    `__index__`, since `True` as a position is almost always a mistake.

    Args:
        value (object):
            The value to check and convert.
        what (str):
            Name used for the value in error messages.

    Returns:
        int:
            The value as a non-negative builtin int.

    Raises:
        TypeError:
            If the value is a bool or does not implement `__index__`.
        ValueError:
            If the value is negative.

    Example:
        >>> index_cast(3)
        3

        >>> index_cast(numpy.uint8(7))
        7

        >>> index_cast(-1)
        ValueError: index_cast failed: index must be non-negative, got -1

        >>> index_cast("2")
        TypeError: index_cast failed: expected an integer index, got str
    """
    if isinstance(value, bool):
        raise TypeError(f"index_cast failed: expected an integer {what}, got bool")

    try:
        result = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"index_cast failed: expected an integer {what}, got {_format_type_name(value)}"
        ) from None

    if result < 0:
        raise ValueError(f"index_cast failed: {what} must be non-negative, got {result}")
    return result
