"""Evaluation of decoded packet trees.

Both walks are pure: they read the tree and return a value, nothing else.
"""

import math

from packets.errors import ArityError, EmptyReduction
from packets.packet import Literal, Operation, Packet


def sum_of_versions(packet: Packet) -> int:
    """Sum the version field of a packet and every packet below it."""
    return packet.version + sum(sum_of_versions(child) for child in packet.children)


def evaluate(packet: Packet) -> int:
    """Compute the value of the expression rooted at packet.

    Comparison operators yield 1 when the comparison holds and 0 otherwise.

    Raises:
        EmptyReduction: If Minimum or Maximum has no operands
        ArityError: If a comparison does not have exactly two operands
    """
    body = packet.body
    if isinstance(body, Literal):
        return body.value

    operation = body.operation
    values = [evaluate(child) for child in body.children]

    if operation.is_comparison:
        if len(values) != 2:
            raise ArityError(_COMPARISON_NAMES[operation], values, render(packet))
        left, right = values
        if operation is Operation.GREATER_THAN:
            return int(left > right)
        if operation is Operation.LESS_THAN:
            return int(left < right)
        return int(left == right)

    if operation is Operation.SUM:
        return sum(values)
    if operation is Operation.PRODUCT:
        return math.prod(values)
    if not values:
        raise EmptyReduction(operation.name.capitalize(), render(packet))
    if operation is Operation.MINIMUM:
        return min(values)
    return max(values)


_COMPARISON_NAMES = {
    Operation.GREATER_THAN: "GreaterThan",
    Operation.LESS_THAN: "LessThan",
    Operation.EQUAL_TO: "EqualTo",
}


def render(packet: Packet) -> str:
    """One-line prefix form of the expression, e.g. ``(sum 1 (max 2 3))``."""
    if packet.is_literal:
        return str(packet.body.value)
    parts = [packet.body.operation.symbol]
    parts.extend(render(child) for child in packet.children)
    return "(" + " ".join(parts) + ")"
