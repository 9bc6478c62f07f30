"""
b32u64 package entry point.

Allows running: python -m b32u64 [command] [args]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
