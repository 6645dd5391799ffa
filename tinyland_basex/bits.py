"""Bit cursor shared by the bit-packing codecs (Base32 and Base122).

Groups are read and written most significant bit first, so a 5-bit or 7-bit
group may straddle two neighbouring bytes:

    byte 0   byte 1
    01010100 01100101
    [ g0][ g1 ][ g2]...   (5-bit groups)
"""

from typing import Iterator, Optional


class BitCursor:
    """Transient (position, offset) state for one encode or decode call.

    ``position`` is the index of the source byte being read, ``offset`` the
    number of bits already consumed from it (reading) or pending in ``carry``
    (writing). A cursor is used in one direction only.
    """

    __slots__ = ("position", "offset", "carry")

    def __init__(self) -> None:
        self.position = 0
        self.offset = 0
        self.carry = 0

    def next_group(self, source: bytes, width: int) -> Optional[int]:
        """Read the next ``width``-bit group from ``source``.

        Returns None once every source byte has been consumed. A group that
        runs past the last byte is padded with zero bits on the right.
        """
        if self.position >= len(source):
            return None

        value = ((source[self.position] << self.offset) & 0xFF) >> (8 - width)
        self.offset += width
        if self.offset < 8:
            return value

        self.offset -= 8
        self.position += 1
        if self.offset == 0 or self.position >= len(source):
            return value
        return value | (source[self.position] >> (8 - self.offset))

    def iter_groups(self, source: bytes, width: int) -> Iterator[int]:
        """Yield ``width``-bit groups until ``source`` is exhausted."""
        while True:
            group = self.next_group(source, width)
            if group is None:
                return
            yield group

    def push_group(self, sink: bytearray, width: int, value: int) -> None:
        """Append the low ``width`` bits of ``value`` to ``sink``.

        Completed bytes are appended to ``sink`` as soon as eight bits are
        available; leftover bits wait in ``carry`` for the next call.
        """
        aligned = (value << (8 - width)) & 0xFF
        self.carry |= aligned >> self.offset
        self.offset += width
        if self.offset >= 8:
            sink.append(self.carry)
            self.offset -= 8
            self.carry = (aligned << (width - self.offset)) & 0xFF
