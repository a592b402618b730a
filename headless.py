#!/usr/bin/env python3
"""
Convenience entry point for headless runs.

Usage:
    python headless.py                         # Default config, 1000 ticks
    python headless.py --ticks 5000 --seed 3   # Reproducible longer run
"""

from tools.headless import main

if __name__ == "__main__":
    main()
