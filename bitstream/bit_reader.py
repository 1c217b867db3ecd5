"""MSB-first bit reader over hexadecimal transmission text.

Each hex digit expands to four bits, most significant bit first, in input
order. The bits live in a fixed numpy buffer and reads advance a cursor, so
position() and remaining_len() are O(1) and nothing is ever removed from the
front of the buffer.

Example:
    reader = BitReader.from_hex("D2FE28")
    version = reader.read_bits(3)    # 6
    type_id = reader.read_bits(3)    # 4
"""

import numpy as np

from bitstream.errors import InvalidHexCharacter, UnexpectedEndOfStream

# --- Constants ---

BITS_PER_HEX_DIGIT = 4
HEX_DIGITS = "0123456789ABCDEF"

# Bit shifts that split a nibble into its four bits, MSB first.
_NIBBLE_SHIFTS = np.arange(BITS_PER_HEX_DIGIT - 1, -1, -1, dtype=np.uint8)


def hex_to_bits(text: str) -> np.ndarray:
    """Expand hex text into a flat uint8 array of 0/1 values.

    Args:
        text: Uppercase hex digits with no separators

    Returns:
        Array of length 4 * len(text), MSB of the first digit first

    Raises:
        InvalidHexCharacter: If any character is not one of 0-9A-F
    """
    nibbles = np.empty(len(text), dtype=np.uint8)
    for index, char in enumerate(text):
        value = HEX_DIGITS.find(char)
        if value < 0:
            raise InvalidHexCharacter(char, index)
        nibbles[index] = value
    return ((nibbles[:, None] >> _NIBBLE_SHIFTS) & 1).astype(np.uint8).ravel()


class BitReader:
    """Cursor over an immutable bit buffer.

    The cursor only moves forward. A read either returns a value and advances
    the cursor by exactly the requested width, or raises and leaves the cursor
    where it was.
    """

    def __init__(self, bits: np.ndarray) -> None:
        """Copy a bit buffer into a read-only array.

        Args:
            bits: One-dimensional array of 0/1 values
        """
        self._bits = np.array(bits, dtype=np.uint8).ravel()
        self._bits.setflags(write=False)
        self._pos = 0

    @classmethod
    def from_hex(cls, text: str) -> 'BitReader':
        """Build a reader from a line of hex text.

        Surrounding whitespace (such as the newline at the end of an input
        file) is stripped first. Lowercase digits are rejected.

        Raises:
            InvalidHexCharacter: If any character is not one of 0-9A-F
        """
        return cls(hex_to_bits(text.strip()))

    def __len__(self) -> int:
        return len(self._bits)

    def __repr__(self) -> str:
        return f"BitReader(position={self._pos}, length={len(self._bits)})"

    def position(self) -> int:
        """Number of bits consumed so far."""
        return self._pos

    def remaining_len(self) -> int:
        """Number of bits left to read."""
        return len(self._bits) - self._pos

    def read_bits(self, n: int) -> int:
        """Consume the next n bits as an unsigned integer, MSB first.

        Args:
            n: Field width in bits (0 reads nothing and returns 0)

        Returns:
            The field value as a Python int (no width limit)

        Raises:
            ValueError: If n is negative
            UnexpectedEndOfStream: If fewer than n bits remain
        """
        if n < 0:
            raise ValueError(f"width must be non-negative, got {n}")
        remaining = self.remaining_len()
        if n > remaining:
            raise UnexpectedEndOfStream(n, remaining, self._pos)

        value = 0
        for bit in self._bits[self._pos:self._pos + n].tolist():
            value = (value << 1) | bit
        self._pos += n
        return value

    def read_bit(self) -> bool:
        """Consume a single bit.

        Raises:
            UnexpectedEndOfStream: If the stream is exhausted
        """
        return self.read_bits(1) != 0
