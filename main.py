#!/usr/bin/env python3
# /iad/main.py
"""
IAD Main Entry Point
====================

Launcher for running the IAD command line tools from a source checkout,
without installing the package. It performs:
1) Path Setup: ensures the iad package under src/ is importable.
2) Command Import: loads `iad.cli`, failing loudly if it cannot.
3) Command Run: hands the arguments to `iad.cli.start`, which parses them,
   loads the configuration named by `--config` and initializes logging
   before running the command.
"""

from __future__ import annotations

import os
import sys


# --- Step 1: Set up the Python Path ---
project_root = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(project_root, "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# --- Step 2: Import the command line ---
try:
    from iad.cli import start
except Exception as e:
    # Logging is not ready; print to stderr and exit.
    print(f"FATAL: Could not import the iad command line: {e}", file=sys.stderr)
    import traceback
    traceback.print_exc()
    sys.exit(1)


if __name__ == "__main__":
    start(sys.argv[1:])
