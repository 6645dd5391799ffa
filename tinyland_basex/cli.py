"""Command-line interface for tinyland-basex.

Provides subcommands:
  encode - Encode raw bytes from stdin
  decode - Decode text from stdin back to raw bytes
  list   - List the available codecs

The codec defaults to the TINYLAND_BASEX_CODEC environment variable, or
base58 when it is unset; --codec overrides both.

Exit codes:
    0 - Success
    3 - Invalid input or unknown codec
"""

import argparse
import logging
import os
import sys

from tinyland_basex.errors import CodecError, InvalidEncoding
from tinyland_basex.registry import Codec, available_codecs, get_codec

logger = logging.getLogger(__name__)

CODEC_ENV_VAR = "TINYLAND_BASEX_CODEC"
DEFAULT_CODEC = "base58"


def _resolve_codec(args) -> Codec:
    """Resolve the codec from --codec or the environment, exiting 3 if unknown."""
    name = getattr(args, "codec", None) or os.environ.get(CODEC_ENV_VAR) or DEFAULT_CODEC
    try:
        codec = get_codec(name)
    except CodecError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(3)
    logger.debug("using codec %s", codec.name)
    return codec


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when --verbose is given."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_encode(args) -> int:
    """Handle the 'encode' subcommand -- reads stdin, writes encoded text."""
    codec = _resolve_codec(args)
    raw = sys.stdin.buffer.read()
    encoded = codec.encode(raw)
    logger.debug("encoded %d bytes into %d characters", len(raw), len(encoded))
    sys.stdout.write(encoded)
    return 0


def cmd_decode(args) -> int:
    """Handle the 'decode' subcommand -- reads stdin, writes decoded bytes."""
    codec = _resolve_codec(args)
    try:
        text = sys.stdin.buffer.read().decode("utf-8")
    except UnicodeDecodeError:
        print("error: input is not valid UTF-8 text", file=sys.stderr)
        return 3
    # LF and CR are never emitted by whitespace-preserving codecs
    encoded = text.rstrip("\r\n") if codec.preserves_whitespace else text.strip()
    if not encoded:
        return 0
    try:
        decoded = codec.decode(encoded)
    except InvalidEncoding as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    logger.debug("decoded %d characters into %d bytes", len(encoded), len(decoded))
    sys.stdout.buffer.write(decoded)
    return 0


def cmd_list(args) -> int:
    """Handle the 'list' subcommand."""
    for name in available_codecs():
        print(name)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _add_codec_arg(parser: argparse.ArgumentParser) -> None:
    """Add the common --codec argument to a subparser."""
    parser.add_argument(
        "--codec",
        default=None,
        help=(
            f"Codec to use, one of {', '.join(available_codecs())} "
            f"(default: ${CODEC_ENV_VAR} or {DEFAULT_CODEC})"
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinyland-basex",
        description="Binary-to-text encoding with base32, base58, base85 and base122",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('tinyland_basex').__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- encode --
    p_enc = sub.add_parser("encode", help="Encode raw bytes from stdin")
    _add_codec_arg(p_enc)
    p_enc.set_defaults(func=cmd_encode)

    # -- decode --
    p_dec = sub.add_parser("decode", help="Decode text from stdin to raw bytes")
    _add_codec_arg(p_dec)
    p_dec.set_defaults(func=cmd_decode)

    # -- list --
    p_list = sub.add_parser("list", help="List the available codecs")
    p_list.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return args.func(args)
