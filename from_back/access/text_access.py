from from_back.access.seq_access import IdxKey, to_native_key
from from_back.index.seq_index import SeqIndex
from from_back.literal.idx import idx


def _is_char_boundary(data: bytes, position: int) -> bool:
    # UTF-8 continuation bytes look like 0b10xxxxxx
    return position == len(data) or (data[position] & 0xC0) != 0x80


def text_get(text: str, key: IdxKey) -> str:
    """
    Slice text with a range whose bounds may count from the back, measured in UTF-8 bytes.

    Lengths and positions are byte offsets into the UTF-8 encoding of `text`, so
    `"ranges"` has length 6 and `"héllo"` has length 6. Both resolved bounds must fall on a
    character boundary.

    Single offsets are not supported: a byte position does not identify a character.

    Args:
        text (str):
            The text to slice.
        key (IdxKey):
            A range, a native slice, or a range literal string.

    Returns:
        str:
            The selected text.

    Raises:
        TypeError:
            If `key` is a single offset.
        BackOffsetUnderflowError:
            If a back offset exceeds the encoded length.
        IndexError:
            If the resolved range does not fit the text or splits a character.
        ValueError:
            If `key` is a native slice with a step.

    Example:
        >>> text_get("ranges", "1..^2")
        'ang'
    """
    value = idx(key)
    if isinstance(value, SeqIndex):
        raise TypeError("text cannot be indexed by a single offset, use a range")

    data = text.encode("utf-8")
    native = to_native_key(value, len(data))
    assert isinstance(native, slice)
    if native.step is not None:
        raise ValueError("text slicing does not support a step")

    start, stop, _ = native.indices(len(data))
    for position in (start, stop):
        if not _is_char_boundary(data, position):
            raise IndexError(f"byte index {position} is not a char boundary")
    return data[start:stop].decode("utf-8")
