#!/usr/bin/env python3
"""
Rate Counter - command-line launcher
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from ratecounter.cli import main

if __name__ == "__main__":
    sys.exit(main())
