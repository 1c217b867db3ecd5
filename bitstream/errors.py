"""Error taxonomy for the bit reader.

Every failure raised by this project derives from PacketError, which is a
ValueError: malformed input is a bad value, and callers that only know about
ValueError keep working.
"""


class PacketError(ValueError):
    """Base class for all decode and evaluation failures."""


class BitstreamError(PacketError):
    """Raised when the hex text cannot be turned into bits or read from."""


class InvalidHexCharacter(BitstreamError):
    """A character outside 0-9A-F appeared in the transmission text.

    Attributes:
        character: The offending character
        index: Its position in the (stripped) input text
    """

    def __init__(self, character: str, index: int) -> None:
        self.character = character
        self.index = index
        super().__init__(f"Unexpected character {character!r} at index {index}")


class UnexpectedEndOfStream(BitstreamError):
    """A read asked for more bits than remain in the stream.

    Attributes:
        requested: Number of bits the read asked for
        remaining: Number of bits left at the cursor
        position: Cursor position when the read was attempted
    """

    def __init__(self, requested: int, remaining: int, position: int) -> None:
        self.requested = requested
        self.remaining = remaining
        self.position = position
        super().__init__(
            f"Unexpected end of stream at bit {position}: "
            f"requested {requested} bits, {remaining} remaining"
        )
