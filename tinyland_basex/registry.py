"""Lookup of the available codecs by name."""

from types import MappingProxyType
from typing import Callable, NamedTuple

from tinyland_basex.base32 import b32decode, b32encode
from tinyland_basex.base58 import b58decode, b58encode
from tinyland_basex.base85 import b85decode, b85encode
from tinyland_basex.base122 import b122decode, b122encode
from tinyland_basex.errors import InvalidArgument


class Codec(NamedTuple):
    """An encode/decode pair.

    ``preserves_whitespace`` is set for codecs whose output may contain
    meaningful spaces or tabs, so callers must not strip them.
    """

    name: str
    encode: Callable[[bytes], str]
    decode: Callable[[str], bytes]
    preserves_whitespace: bool = False


CODECS = MappingProxyType(
    {
        "base32": Codec("base32", b32encode, b32decode),
        "base58": Codec("base58", b58encode, b58decode),
        "base85": Codec("base85", b85encode, b85decode),
        "base122": Codec("base122", b122encode, b122decode, preserves_whitespace=True),
    }
)


def available_codecs() -> tuple[str, ...]:
    """Return the sorted names of all registered codecs."""
    return tuple(sorted(CODECS))


def get_codec(name: str) -> Codec:
    """Return the codec registered under ``name`` (case insensitive).

    Raises:
        InvalidArgument: If no codec has that name.
    """
    codec = CODECS.get(str(name).strip().lower())
    if codec is None:
        raise InvalidArgument(
            f"Unknown codec {name!r} (available: {', '.join(available_codecs())})"
        )
    return codec
