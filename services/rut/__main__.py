"""
Entry point for running the RUT toolkit as a module.

Usage:
    python -m services.rut dv 12.345.678
    python -m services.rut validate 12.345.678-5
    python -m services.rut format 123456785 --to grouped-separated
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
