"""Packet tree data structures.

A packet is either a literal value or an operator over child packets. The
body is a tagged union of two frozen dataclasses, and children are stored in a
tuple, so a decoded tree cannot be modified after construction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from packets.config import LITERAL_TYPE_ID
from packets.errors import UnknownOperation


# --- Operation Enum ---
class Operation(Enum):
    """Operator packet function, keyed by packet type ID.

    Type ID 4 is reserved for literals and has no member here.
    """
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @classmethod
    def from_type_id(cls, type_id: int) -> 'Operation':
        """Map an operator type ID to its Operation.

        Raises:
            UnknownOperation: If type_id is the literal ID or out of range
        """
        if type_id == LITERAL_TYPE_ID:
            raise UnknownOperation(type_id)
        try:
            return cls(type_id)
        except ValueError:
            raise UnknownOperation(type_id) from None

    @property
    def is_comparison(self) -> bool:
        return self in (Operation.GREATER_THAN, Operation.LESS_THAN, Operation.EQUAL_TO)

    @property
    def symbol(self) -> str:
        """Short lowercase name used when rendering expressions."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.SUM: "sum",
    Operation.PRODUCT: "product",
    Operation.MINIMUM: "min",
    Operation.MAXIMUM: "max",
    Operation.GREATER_THAN: "gt",
    Operation.LESS_THAN: "lt",
    Operation.EQUAL_TO: "eq",
}


# --- Packet Bodies ---
@dataclass(frozen=True)
class Literal:
    """Literal body: a single unsigned integer."""
    value: int


@dataclass(frozen=True)
class Operator:
    """Operator body: a function applied to child packets in order."""
    operation: Operation
    children: tuple['Packet', ...] = field(default_factory=tuple)


Body = Union[Literal, Operator]


@dataclass(frozen=True)
class Packet:
    """One decoded node of the transmission.

    Attributes:
        version: 3-bit version field (0-7)
        type_id: 3-bit type field; LITERAL_TYPE_ID for literals
        body: Literal or Operator payload
    """
    version: int
    type_id: int
    body: Body

    @property
    def is_literal(self) -> bool:
        return isinstance(self.body, Literal)

    @property
    def children(self) -> tuple['Packet', ...]:
        """Child packets; empty for literals."""
        if isinstance(self.body, Operator):
            return self.body.children
        return ()
