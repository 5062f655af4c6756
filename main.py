#!/usr/bin/env python3
"""Pom Pilot — entry point.

Run with:
    python main.py
    python -m pompilot
"""

from pompilot.__main__ import main


if __name__ == "__main__":
    main()
