"""Exceptions raised by the tinyland-basex codecs."""


class CodecError(Exception):
    """Base exception for codec operations."""


class InvalidEncoding(CodecError, ValueError):
    """Raised when text cannot be decoded by the selected codec."""


class InvalidArgument(CodecError, TypeError):
    """Raised when a codec receives missing or wrongly typed input."""


def require_bytes(data) -> bytes:
    """Return ``data`` as bytes, rejecting anything that is not binary."""
    if data is None:
        raise InvalidArgument("Input must not be None")
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidArgument("Input must be bytes")
    return bytes(data)


def require_str(encoded) -> str:
    """Return ``encoded`` unchanged if it is a string."""
    if encoded is None:
        raise InvalidArgument("Input must not be None")
    if not isinstance(encoded, str):
        raise InvalidArgument("Input must be a string")
    return encoded
