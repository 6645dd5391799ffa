"""Base58 codec (Bitcoin alphabet).

The whole input is treated as one big-endian unsigned integer. Leading zero
bytes carry no magnitude, so each one is written as a leading ``1``.
"""

from tinyland_basex.errors import InvalidEncoding, require_bytes, require_str

BITCOIN_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_MAP = {char: idx for idx, char in enumerate(BITCOIN_ALPHABET)}
_ZERO = BITCOIN_ALPHABET[0]
_BLANK_CHARS = "\t\n\v\f\r "


def b58encode(data: bytes) -> str:
    """Encode bytes to a base58 string using the Bitcoin alphabet."""
    data = require_bytes(data)
    if not data:
        return ""

    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    num = int.from_bytes(data, byteorder="big")
    encoded = []
    while num > 0:
        num, rem = divmod(num, 58)
        encoded.append(BITCOIN_ALPHABET[rem])

    return _ZERO * leading_zeros + "".join(reversed(encoded))


def b58decode(encoded: str) -> bytes:
    """Decode a base58 string to bytes using the Bitcoin alphabet.

    Raises:
        InvalidEncoding: If the string contains a character outside the
            Bitcoin alphabet.
    """
    encoded = require_str(encoded)
    if not encoded.strip(_BLANK_CHARS):
        return b""

    leading_zeros = 0
    counting = True
    num = 0
    for ch in encoded:
        digit = _B58_MAP.get(ch)
        if digit is None:
            raise InvalidEncoding(f"Invalid base58 character: {ch!r}")
        if counting and ch == _ZERO:
            leading_zeros += 1
        else:
            counting = False
        num = num * 58 + digit

    byte_len = (num.bit_length() + 7) // 8
    return b"\x00" * leading_zeros + num.to_bytes(byte_len, byteorder="big")


def b58encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base58."""
    return b58encode(text.encode(encoding))


def b58decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base58 string to text."""
    return b58decode(encoded).decode(encoding)
