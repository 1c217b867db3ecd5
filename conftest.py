"""Pytest configuration for the packet decoder."""

import sys
from pathlib import Path

# Put the project root on the path so the top-level packages import directly
root_dir = Path(__file__).parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))
