from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from from_back.index.errors import BackOffsetUnderflowError
from from_back.typeutils.index_cast import index_cast


class Anchor(Enum):
    """
    The end of the sequence an offset is measured from.
    """
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class SeqIndex:
    """
    An offset counted either from the front or from the back of a sequence.

    `SeqIndex.from_front(n)` is the ordinary zero-based position `n`.
    `SeqIndex.from_back(n)` is the position `n` elements before the logical end, so
    `from_back(0)` is one past the last element and `from_back(length)` is position 0.

    The value carries no reference to any sequence; it is resolved against a length with
    `resolve()` at the point of use. The default value is `from_front(0)`.

    Attributes:
        value (int):
            Non-negative distance from the anchored end.

        anchor (Anchor):
            Which end of the sequence `value` is measured from.

    Example:
        >>> data = [8, 6, 7, 5, 3, 0, 9]
        >>> SeqIndex.from_back(2).resolve(len(data))
        5
        >>> data[SeqIndex.from_back(2).resolve(len(data))]
        0
    """
    value: int = 0
    anchor: Anchor = Anchor.FRONT

    def __post_init__(self) -> None:
        # frozen dataclass; normalise through object.__setattr__
        object.__setattr__(self, "value", index_cast(self.value, "offset"))
        if not isinstance(self.anchor, Anchor):
            raise TypeError(f"anchor must be an Anchor, got {type(self.anchor).__name__}")

    @classmethod
    def from_front(cls, value: int) -> SeqIndex:
        """
        Create an offset counted from the front of the sequence.

        Args:
            value (int):
                Zero-based position from the front.

        Returns:
            SeqIndex:
                The front-relative offset.
        """
        return cls(value, Anchor.FRONT)

    @classmethod
    def from_back(cls, value: int) -> SeqIndex:
        """
        Create an offset counted from the back of the sequence.

        Args:
            value (int):
                Distance before the logical end; 0 is the position one past the last element.

        Returns:
            SeqIndex:
                The back-relative offset.
        """
        return cls(value, Anchor.BACK)

    @property
    def is_from_back(self) -> bool:
        """True if the offset counts from the back of the sequence."""
        return self.anchor is Anchor.BACK

    def checked_resolve(self, length: int) -> int | None:
        """
        Convert this offset to a zero-based front-relative position, or None on underflow.

        A front-relative offset resolves to its value unconditionally; it is not checked
        against `length`, that is left to the sequence being indexed.

        Args:
            length (int):
                Current length of the sequence.

        Returns:
            int | None:
                The concrete position, or None if a back offset exceeds `length`.
        """
        length = index_cast(length, "length")
        if self.anchor is Anchor.FRONT:
            return self.value
        if self.value > length:
            return None
        return length - self.value

    def resolve(self, length: int) -> int:
        """
        Convert this offset to a zero-based front-relative position.

        Args:
            length (int):
                Current length of the sequence.

        Returns:
            int:
                `value` for a front offset, `length - value` for a back offset.

        Raises:
            BackOffsetUnderflowError:
                If this is a back offset whose value exceeds `length`.
        """
        length = index_cast(length, "length")
        if (position := self.checked_resolve(length)) is None:
            raise BackOffsetUnderflowError(self.value, length)
        return position

    def __str__(self) -> str:
        return f"^{self.value}" if self.is_from_back else str(self.value)

    def __repr__(self) -> str:
        return f"SeqIndex.from_{self.anchor.value}({self.value})"


def as_seq_index(value: SeqIndex | int) -> SeqIndex:
    """
    Normalise a range bound: plain ints become front offsets.
    """
    if isinstance(value, SeqIndex):
        return value
    return SeqIndex.from_front(value)
