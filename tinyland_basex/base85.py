"""Base85 codec (Ascii85 symbol range with the ``z`` zero-block shortcut).

Every 4-byte big-endian block becomes 5 symbols from ``!`` (0x21) to ``u``
(0x75). A full block of zeros is written as the single symbol ``z``. A
trailing block of n < 4 bytes produces n + 1 symbols.
"""

from tinyland_basex.errors import InvalidEncoding, require_bytes, require_str

FIRST_SYMBOL = "!"
LAST_SYMBOL = "u"
ZERO_BLOCK = "z"
IGNORED_CHARS = frozenset("\t\n\v\f\r ")

_BASE = ord(FIRST_SYMBOL)
_MAX_DIGIT = ord(LAST_SYMBOL) - _BASE
_POWERS = (85**4, 85**3, 85**2, 85, 1)
_BLOCK_SIZE = 4
_GROUP_SIZE = 5


def _encode_block(block: bytes) -> str:
    value = int.from_bytes(block.ljust(_BLOCK_SIZE, b"\x00"), byteorder="big")
    if value == 0 and len(block) == _BLOCK_SIZE:
        return ZERO_BLOCK

    symbols = []
    for power in _POWERS[: len(block) + 1]:
        digit, value = divmod(value, power)
        symbols.append(chr(digit + _BASE))
    return "".join(symbols)


def _decode_group(digits: list[int]) -> bytes:
    value = sum(digit * power for digit, power in zip(digits, _POWERS))
    return (value & 0xFFFFFFFF).to_bytes(_BLOCK_SIZE, byteorder="big")


def b85encode(data: bytes) -> str:
    """Encode bytes to a base85 string."""
    data = require_bytes(data)
    return "".join(
        _encode_block(data[start : start + _BLOCK_SIZE])
        for start in range(0, len(data), _BLOCK_SIZE)
    )


def b85decode(encoded: str) -> bytes:
    """Decode a base85 string to bytes.

    Whitespace anywhere in the input is skipped. A final group of fewer than
    five symbols is padded with ``u`` and truncated to one byte less than its
    symbol count.

    Raises:
        InvalidEncoding: If a symbol is outside ``!``..``u``, or ``z`` appears
            in the middle of a group.
    """
    encoded = require_str(encoded)
    if all(ch in IGNORED_CHARS for ch in encoded):
        return b""

    decoded = bytearray()
    group: list[int] = []
    for ch in encoded:
        if ch in IGNORED_CHARS:
            continue
        if ch == ZERO_BLOCK:
            if group:
                raise InvalidEncoding(
                    f"Invalid base85 character: {ch!r} inside a group"
                )
            decoded += b"\x00" * _BLOCK_SIZE
            continue
        if not FIRST_SYMBOL <= ch <= LAST_SYMBOL:
            raise InvalidEncoding(f"Invalid base85 character: {ch!r}")
        group.append(ord(ch) - _BASE)
        if len(group) == _GROUP_SIZE:
            decoded += _decode_group(group)
            group = []

    if group:
        padded = group + [_MAX_DIGIT] * (_GROUP_SIZE - len(group))
        decoded += _decode_group(padded)[: len(group) - 1]

    return bytes(decoded)


def b85encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base85."""
    return b85encode(text.encode(encoding))


def b85decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base85 string to text."""
    return b85decode(encoded).decode(encoding)
