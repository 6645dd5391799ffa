"""Base32 codec (Douglas Crockford alphabet, no check symbol).

Bytes are packed into 5-bit groups without padding. Decoding is case
insensitive, tolerates the look-alike letters O, I and L, and skips
formatting characters such as spaces and hyphens.
"""

from tinyland_basex.bits import BitCursor
from tinyland_basex.errors import InvalidEncoding, require_bytes, require_str

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ALIASES = {"O": 0, "I": 1, "L": 1}
IGNORED_CHARS = frozenset("\t\n\v\f\r -")

_B32_MAP = {char: idx for idx, char in enumerate(CROCKFORD_ALPHABET)}
_GROUP_BITS = 5


def b32encode(data: bytes) -> str:
    """Encode bytes to an unpadded Crockford base32 string."""
    data = require_bytes(data)
    cursor = BitCursor()
    return "".join(
        CROCKFORD_ALPHABET[group] for group in cursor.iter_groups(data, _GROUP_BITS)
    )


def b32decode(encoded: str) -> bytes:
    """Decode a Crockford base32 string to bytes.

    Raises:
        InvalidEncoding: If a character is neither a base32 symbol, an alias
            nor an ignored formatting character.
    """
    encoded = require_str(encoded)
    if all(ch in IGNORED_CHARS for ch in encoded):
        return b""

    decoded = bytearray()
    cursor = BitCursor()
    for ch in encoded:
        if ch in IGNORED_CHARS:
            continue
        upper = ch.upper()
        value = _B32_MAP.get(upper, ALIASES.get(upper))
        if value is None:
            raise InvalidEncoding(f"Invalid base32 character: {ch!r}")
        cursor.push_group(decoded, _GROUP_BITS, value)

    return bytes(decoded)


def b32encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base32."""
    return b32encode(text.encode(encoding))


def b32decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base32 string to text."""
    return b32decode(encoded).decode(encoding)
