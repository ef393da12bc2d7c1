"""jugsolver CLI entry point.

This module enables running jugsolver as:
    python -m jugsolver <command>
"""

from jugsolver.cli import main

if __name__ == "__main__":
    main()
