"""Tinyland BaseX - binary-to-text codecs with exact round-trips.

Provides four independent encodings of arbitrary bytes as printable text:
Crockford base32, Bitcoin base58, Ascii85-style base85 and UTF-8 safe
base122. Includes a small CLI for encoding and decoding via stdin/stdout.
"""

__version__ = "0.1.0"

from tinyland_basex.errors import (  # noqa: F401
    CodecError,
    InvalidArgument,
    InvalidEncoding,
)
from tinyland_basex.base32 import (  # noqa: F401
    b32encode,
    b32decode,
    b32encode_str,
    b32decode_str,
)
from tinyland_basex.base58 import (  # noqa: F401
    b58encode,
    b58decode,
    b58encode_str,
    b58decode_str,
)
from tinyland_basex.base85 import (  # noqa: F401
    b85encode,
    b85decode,
    b85encode_str,
    b85decode_str,
)
from tinyland_basex.base122 import (  # noqa: F401
    b122encode,
    b122decode,
    b122encode_str,
    b122decode_str,
)
from tinyland_basex.registry import (  # noqa: F401
    Codec,
    available_codecs,
    get_codec,
)
from tinyland_basex.cli import main  # noqa: F401
