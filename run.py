#!/usr/bin/env python3
"""
Car Management Entry Point

Starts the interactive car inventory console seeded with sample cars.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from car_ledger.__main__ import main


if __name__ == "__main__":
    sys.exit(main(["cars"] + sys.argv[1:]))
