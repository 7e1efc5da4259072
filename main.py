#!/usr/bin/env python3
"""
Look up BSL videos for a phrase without installing the package.
Runs the CLI in src/bsl_lookup; run from project root.
"""

import sys
from pathlib import Path

# Ensure src is on path when running from a checkout
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


if __name__ == "__main__":
    from bsl_lookup.cli import main

    sys.exit(main())
