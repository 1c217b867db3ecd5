"""Packet tree decoding and evaluation.

Decodes hex transmissions into immutable packet trees and evaluates them as
arithmetic/comparison expressions.
"""

from packets.config import DecoderOptions
from packets.decoder import DecodeResult, decode_hex, decode_packet, decode_transmission
from packets.errors import (
    ArityError,
    EmptyReduction,
    LengthMismatch,
    NestingTooDeep,
    PacketDecodeError,
    PacketEvaluationError,
    UnknownOperation,
)
from packets.evaluator import evaluate, render, sum_of_versions
from packets.packet import Literal, Operation, Operator, Packet

__all__ = [
    'Packet',
    'Literal',
    'Operator',
    'Operation',
    'DecoderOptions',
    'DecodeResult',
    'decode_packet',
    'decode_hex',
    'decode_transmission',
    'sum_of_versions',
    'evaluate',
    'render',
    'PacketDecodeError',
    'PacketEvaluationError',
    'LengthMismatch',
    'UnknownOperation',
    'NestingTooDeep',
    'ArityError',
    'EmptyReduction',
]
