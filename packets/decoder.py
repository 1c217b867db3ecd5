"""Recursive-descent packet decoder.

Every field has a fixed width or an explicit terminator, so one forward pass
over the bits decodes the whole tree with no backtracking:

    packet   := version(3) type_id(3) body
    body     := literal                      if type_id == 4
              | length_type(1) children      otherwise
    literal  := { 1 data(4) } 0 data(4)
    children := 0 bit_length(15) packet*     children span exactly bit_length bits
              | 1 count(11) packet{count}

Decoding the outermost packet consumes exactly the bits that packet occupies.
Anything after it in the transmission is padding and is left unread.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from bitstream.bit_reader import BitReader
from packets.config import (
    COUNT_BITS,
    LENGTH_BITS,
    LENGTH_TYPE_BITS,
    LENGTH_TYPE_PACKET_COUNT,
    LITERAL_GROUP_DATA_BITS,
    LITERAL_TYPE_ID,
    TYPE_ID_BITS,
    VERSION_BITS,
    DecoderOptions,
)
from packets.errors import LengthMismatch, NestingTooDeep
from packets.packet import Literal, Operation, Operator, Packet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outermost packet of a transmission plus how much of it was used.

    Attributes:
        packet: Root of the decoded tree
        consumed_bits: Bits occupied by the outermost packet
        padding_bits: Trailing bits after the packet that were not read
    """
    packet: Packet
    consumed_bits: int
    padding_bits: int


# --- Public API ---

def decode_packet(reader: BitReader, options: Optional[DecoderOptions] = None) -> Packet:
    """Decode one packet, and all of its sub-packets, at the reader's cursor.

    On success the cursor sits on the first bit after the packet.

    Args:
        reader: Bit source, positioned at a packet header
        options: Decoder limits (defaults to DecoderOptions())

    Returns:
        The decoded packet tree

    Raises:
        UnexpectedEndOfStream: If the stream ends inside the packet
        LengthMismatch: If a length-delimited group overruns its length
        UnknownOperation: If an operator type ID has no Operation
        NestingTooDeep: If operators nest deeper than options.max_depth
    """
    if options is None:
        options = DecoderOptions()
    return _decode(reader, options, depth=0)


def decode_hex(text: str, options: Optional[DecoderOptions] = None) -> Packet:
    """Decode the outermost packet of a hex transmission."""
    return decode_packet(BitReader.from_hex(text), options)


def decode_transmission(text: str, options: Optional[DecoderOptions] = None) -> DecodeResult:
    """Decode a hex transmission and report how many bits the packet used.

    Args:
        text: Hex digits 0-9A-F, surrounding whitespace ignored
        options: Decoder limits (defaults to DecoderOptions())

    Returns:
        DecodeResult with the packet and its consumed/padding bit counts
    """
    reader = BitReader.from_hex(text)
    packet = decode_packet(reader, options)
    result = DecodeResult(
        packet=packet,
        consumed_bits=reader.position(),
        padding_bits=reader.remaining_len(),
    )
    logger.debug(
        "Decoded %d-bit transmission: packet uses %d bits, %d bits of padding",
        len(reader), result.consumed_bits, result.padding_bits,
    )
    return result


# --- Grammar ---

def _decode(reader: BitReader, options: DecoderOptions, depth: int) -> Packet:
    """Decode a packet at the given nesting depth."""
    if depth > options.max_depth:
        raise NestingTooDeep(options.max_depth)

    version = reader.read_bits(VERSION_BITS)
    type_id = reader.read_bits(TYPE_ID_BITS)

    if type_id == LITERAL_TYPE_ID:
        return Packet(version, type_id, Literal(_decode_literal(reader)))

    children = _decode_children(reader, options, depth)
    operation = Operation.from_type_id(type_id)
    return Packet(version, type_id, Operator(operation, children))


def _decode_literal(reader: BitReader) -> int:
    """Accumulate 4-bit data groups until a group with a 0 continuation bit."""
    value = 0
    while True:
        more = reader.read_bit()
        value = (value << LITERAL_GROUP_DATA_BITS) | reader.read_bits(LITERAL_GROUP_DATA_BITS)
        if not more:
            return value


def _decode_children(reader: BitReader, options: DecoderOptions, depth: int) -> tuple[Packet, ...]:
    """Decode an operator's sub-packets, count- or length-delimited."""
    children: list[Packet] = []

    if reader.read_bits(LENGTH_TYPE_BITS) == LENGTH_TYPE_PACKET_COUNT:
        count = reader.read_bits(COUNT_BITS)
        for _ in range(count):
            children.append(_decode(reader, options, depth + 1))
        return tuple(children)

    bit_length = reader.read_bits(LENGTH_BITS)
    target = reader.position() + bit_length
    while reader.position() < target:
        children.append(_decode(reader, options, depth + 1))
    if reader.position() != target:
        raise LengthMismatch(expected=target, actual=reader.position())
    return tuple(children)
