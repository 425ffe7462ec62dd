import re

from from_back.index.seq_index import SeqIndex
from from_back.index.seq_range import SeqRange, SeqRangeFrom, SeqRangeInclusive, SeqRangeLike

IdxValue = SeqIndex | SeqRangeLike | slice

_BOUND = r"(?:(?P<{name}_back>\^)?\s*(?P<{name}>[0-9]+))?"

_LITERAL_RE = re.compile(
    r"^\s*"
    + _BOUND.format(name="start")
    + r"\s*(?P<op>\.\.=|\.\.)?\s*"
    + _BOUND.format(name="end")
    + r"\s*$"
)


def back(value: int) -> SeqIndex:
    """
    Shorthand for `SeqIndex.from_back(value)`, the `^value` of the literal syntax.
    """
    return SeqIndex.from_back(value)


def front(value: int) -> SeqIndex:
    """
    Shorthand for `SeqIndex.from_front(value)`.
    """
    return SeqIndex.from_front(value)


def _bound(match: re.Match[str], name: str) -> SeqIndex | None:
    digits = match.group(name)
    if digits is None:
        return None
    if match.group(f"{name}_back"):
        return SeqIndex.from_back(int(digits))
    return SeqIndex.from_front(int(digits))


def parse_idx(literal: str) -> IdxValue:
    """
    Parse the compact from-back literal syntax into an offset or range value.

    The grammar mirrors native range syntax with a leading `^` marking a bound that
    counts from the back of the sequence:

        ===============  ================================================
        Literal          Result
        ===============  ================================================
        ``"N"``          ``SeqIndex.from_front(N)``
        ``"^N"``         ``SeqIndex.from_back(N)``
        ``"A..B"``       ``SeqRange(A, B)``
        ``"A.."``        ``SeqRangeFrom(A)``
        ``"..B"``        ``SeqRange(from_front(0), B)``
        ``"A..=B"``      ``SeqRangeInclusive(A, B)``
        ``"..=B"``       ``SeqRangeInclusive(from_front(0), B)``
        ``".."``         ``slice(None)``
        ===============  ================================================

    where `A` and `B` are `N` or `^N`. `".."` needs no from-back arithmetic and is passed
    through as the native unbounded slice. No resolution is performed.

    Args:
        literal (str):
            The literal to parse. Whitespace around tokens is ignored.

    Returns:
        SeqIndex | SeqRange | SeqRangeFrom | SeqRangeInclusive | slice:
            The constructed value.

    Raises:
        ValueError:
            If the literal does not match the grammar, or is an inclusive range without an
            end (``"A..="``).

    Example:
        >>> parse_idx("2..^3")
        SeqRange(start=SeqIndex.from_front(2), end=SeqIndex.from_back(3))

        >>> parse_idx("^2")
        SeqIndex.from_back(2)
    """
    if (match := _LITERAL_RE.match(literal)) is None:
        raise ValueError(f"Invalid index literal: {literal!r}")

    start = _bound(match, "start")
    end = _bound(match, "end")
    op = match.group("op")

    if op is None:
        if start is None or end is not None:
            raise ValueError(f"Invalid index literal: {literal!r}")
        return start

    if op == "..=":
        if end is None:
            raise ValueError(f"Inclusive range literal requires an end: {literal!r}")
        return SeqRangeInclusive(start if start is not None else SeqIndex(), end)

    if start is None and end is None:
        return slice(None)
    if end is None:
        return SeqRangeFrom(start)
    return SeqRange(start if start is not None else SeqIndex(), end)


def idx(literal: str | int | IdxValue) -> IdxValue:
    """
    Build an offset or range value from a literal.

    Strings are parsed with `parse_idx()`, plain integers become front offsets, and values
    that are already offsets, ranges or slices are returned unchanged, so `idx()` can be
    applied to any key before handing it to an accessor.

    Args:
        literal (str | int | SeqIndex | SeqRange | SeqRangeFrom | SeqRangeInclusive | slice):
            The literal or value.

    Returns:
        SeqIndex | SeqRange | SeqRangeFrom | SeqRangeInclusive | slice:
            The constructed value.

    Raises:
        ValueError:
            If a string literal is malformed or an integer is negative.
        TypeError:
            If `literal` is of an unsupported type.

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> seq_get(data, idx("2..^3"))
        [7, 5]
        >>> seq_get(data, idx("^2"))
        0
    """
    if isinstance(literal, (SeqIndex, SeqRange, SeqRangeFrom, SeqRangeInclusive, slice)):
        return literal
    if isinstance(literal, str):
        return parse_idx(literal)
    return SeqIndex.from_front(literal)
