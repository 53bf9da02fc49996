"""
Run with: python -m reverseffmi
"""
import sys

from reverseffmi.main import main

if __name__ == "__main__":
    sys.exit(main())
