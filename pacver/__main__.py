"""
Executable module for pacver.

Running ``python -m pacver`` is equivalent to running ``pacver``.
"""

from __future__ import annotations

import sys

from pacver.cli import main

if __name__ == "__main__":
    sys.exit(main())
