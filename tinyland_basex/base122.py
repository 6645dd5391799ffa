"""Base122 codec, a UTF-8 friendly binary-to-text encoding.

Input is cut into 7-bit groups and each group is written as a single ASCII
character. Six values are unsafe inside strings and markup (NUL, LF, CR,
``"``, ``&`` and ``\\``); such a group is folded together with the following
group into one two-byte UTF-8 sequence::

    110iii1p 10pppppp

where ``iii`` indexes ILLEGAL_BYTES and ``p`` is the 7-bit payload. Index 7
(SHORTENED) marks an unsafe group at the very end of the input, in which case
the payload is the unsafe group itself.

The decoder does not validate its input; feed it only text produced by
b122encode.
"""

from tinyland_basex.bits import BitCursor
from tinyland_basex.errors import InvalidEncoding, require_bytes, require_str

ILLEGAL_BYTES = (0x00, 0x0A, 0x0D, 0x22, 0x26, 0x5C)
SHORTENED = 0x07

_ILLEGAL_INDEX = {value: idx for idx, value in enumerate(ILLEGAL_BYTES)}
_GROUP_BITS = 7


def b122encode(data: bytes) -> str:
    """Encode bytes to a base122 string."""
    data = require_bytes(data)
    encoded = bytearray()
    groups = BitCursor().iter_groups(data, _GROUP_BITS)
    for group in groups:
        index = _ILLEGAL_INDEX.get(group)
        if index is None:
            encoded.append(group)
            continue

        payload = next(groups, None)
        if payload is None:
            index, payload = SHORTENED, group
        encoded.append(0xC2 | (index << 2) | (payload >> 6))
        encoded.append(0x80 | (payload & 0x3F))

    return encoded.decode("utf-8")


def b122decode(encoded: str) -> bytes:
    """Decode a base122 string to bytes."""
    encoded = require_str(encoded)
    if not encoded:
        return b""

    decoded = bytearray()
    cursor = BitCursor()
    for ch in encoded:
        code = ord(ch)
        if code > 0x7F:
            index = (code >> 8) & 0x07
            if index != SHORTENED:
                if index >= len(ILLEGAL_BYTES):
                    raise InvalidEncoding(f"Invalid base122 character: {ch!r}")
                cursor.push_group(decoded, _GROUP_BITS, ILLEGAL_BYTES[index])
            cursor.push_group(decoded, _GROUP_BITS, code & 0x7F)
        else:
            cursor.push_group(decoded, _GROUP_BITS, code)

    return bytes(decoded)


def b122encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base122."""
    return b122encode(text.encode(encoding))


def b122decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base122 string to text."""
    return b122decode(encoded).decode(encoding)
