class BackOffsetUnderflowError(IndexError):
    """
    Raised when a from-back offset is resolved against a sequence shorter than the offset.

    `FromBack(n)` denotes position `length - n`; when `n > length` that position would be
    negative. The condition is always reported, never clamped to zero or wrapped around.

    Attributes:
        offset (int):
            The back distance that was requested.

        length (int):
            The sequence length it was resolved against.
    """

    offset: int
    length: int

    def __init__(self, offset: int, length: int):
        super().__init__(f"back offset ^{offset} exceeds sequence length {length}")
        self.offset = offset
        self.length = length
