#!/usr/bin/env python3
"""
perlinfield CLI - development entry point.

Thin wrapper around perlinfield.cli.main for running from a source checkout.
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from perlinfield.cli.main import main


if __name__ == "__main__":
    sys.exit(main())
