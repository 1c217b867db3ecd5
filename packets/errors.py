"""Decode and evaluation errors for packet trees."""

from bitstream.errors import PacketError


class PacketDecodeError(PacketError):
    """Raised when the bit stream does not form a well-formed packet."""


class LengthMismatch(PacketDecodeError):
    """Children of a length-delimited group overran the declared bit length.

    Attributes:
        expected: Cursor position the group should have ended at
        actual: Cursor position after the last child was decoded
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Read too many bits: sub-packets should end at bit {expected}, "
            f"ended at bit {actual}"
        )


class UnknownOperation(PacketDecodeError):
    """A type ID has no operator meaning."""

    def __init__(self, type_id: int) -> None:
        self.type_id = type_id
        super().__init__(f"Invalid operation code: {type_id}")


class NestingTooDeep(PacketDecodeError):
    """Operator packets are nested deeper than the decoder allows."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Packet nesting exceeds max_depth={max_depth}")


class PacketEvaluationError(PacketError):
    """Raised when a decoded tree has no arithmetic value."""


class ArityError(PacketEvaluationError):
    """A comparison operator does not have exactly two operands.

    Attributes:
        operation_name: Name of the comparison
        values: Evaluated operands that were found
        expression: Rendered prefix form of the offending packet
    """

    def __init__(self, operation_name: str, values: list[int], expression: str = "") -> None:
        self.operation_name = operation_name
        self.values = values
        self.expression = expression
        message = f"{operation_name} packet does not have two values: {values}"
        if expression:
            message += f" in {expression}"
        super().__init__(message)


class EmptyReduction(PacketEvaluationError):
    """Minimum or Maximum was applied to zero operands."""

    def __init__(self, operation_name: str, expression: str = "") -> None:
        self.operation_name = operation_name
        self.expression = expression
        message = f"Cannot find the {operation_name.lower()} of nothing"
        if expression:
            message += f" in {expression}"
        super().__init__(message)
