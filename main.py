#!/usr/bin/env python3
"""
graphlane - lane-based commit graph layout

This is a convenience wrapper for running from the repo root.
The actual entry point is graphlane.main:main (for pip install).
"""

import sys

from graphlane.main import main

if __name__ == "__main__":
    sys.exit(main())
