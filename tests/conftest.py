"""Pytest configuration and shared helpers for decoder tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# tests/ sits inside the project root, so parent is the root
project_dir = Path(__file__).parent.parent
if str(project_dir) not in sys.path:
    sys.path.insert(0, str(project_dir))

from bitstream.bit_reader import BitReader  # noqa: E402


def reader_from_bits(bits: str) -> BitReader:
    """Build a reader from a string of '0'/'1' characters (spaces ignored)."""
    digits = [int(c) for c in bits if c in "01"]
    return BitReader(np.array(digits, dtype=np.uint8))


@pytest.fixture
def bits_reader():
    """Factory fixture returning reader_from_bits."""
    return reader_from_bits
