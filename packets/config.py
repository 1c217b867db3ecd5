"""Transmission format constants and decoder options.

Field layout of a packet header, MSB first:

    VVV TTT ...
    |   |
    |   +-- type ID (4 = literal, anything else = operator)
    +------ version

Literal bodies are a run of 5-bit groups (1 continuation bit + 4 data bits).
Operator bodies start with a 1-bit length type ID:

    0 -> 15-bit total bit length of the sub-packets follows
    1 -> 11-bit number of sub-packets follows
"""

import sys
from dataclasses import dataclass

# --- Header Fields ---
VERSION_BITS = 3
TYPE_ID_BITS = 3
LITERAL_TYPE_ID = 4

# --- Literal Groups ---
LITERAL_GROUP_DATA_BITS = 4

# --- Operator Length Types ---
LENGTH_TYPE_BITS = 1
LENGTH_TYPE_PACKET_COUNT = 1
LENGTH_BITS = 15
COUNT_BITS = 11

DEFAULT_MAX_DEPTH = 256


def supported_max_depth() -> int:
    """Deepest nesting that stays inside the interpreter's recursion limit.

    Decoding costs two frames per nesting level; the rest is headroom for the
    caller's own stack.
    """
    return sys.getrecursionlimit() // 3


@dataclass(frozen=True)
class DecoderOptions:
    """Limits applied while decoding one transmission.

    Attributes:
        max_depth: Deepest operator nesting accepted. The outermost packet is
            depth 0. Bounded by supported_max_depth() so hostile inputs fail
            with NestingTooDeep rather than RecursionError.
    """
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        limit = supported_max_depth()
        if self.max_depth > limit:
            raise ValueError(
                f"max_depth must be <= {limit} under the current recursion limit, "
                f"got {self.max_depth}"
            )
