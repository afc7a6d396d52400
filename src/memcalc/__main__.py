"""
Run with: python -m memcalc
"""
import sys

from memcalc.main import main

if __name__ == "__main__":
    sys.exit(main())
