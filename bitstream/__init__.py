"""Bit-level access to hex-encoded transmissions.

Provides the MSB-first cursor reader used by the packet decoder, together with
the root of the project's error hierarchy.
"""

from bitstream.bit_reader import BitReader, hex_to_bits
from bitstream.errors import (
    BitstreamError,
    InvalidHexCharacter,
    PacketError,
    UnexpectedEndOfStream,
)

__all__ = [
    'BitReader',
    'hex_to_bits',
    'PacketError',
    'BitstreamError',
    'InvalidHexCharacter',
    'UnexpectedEndOfStream',
]
