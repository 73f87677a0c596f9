"""
Entry point for running the SVG scanner as a module.

Usage:
    python -m svgscanner scan icons/*.svg
    python -m svgscanner --help
"""

import sys
from svgscanner.cli import main

if __name__ == "__main__":
    sys.exit(main())
