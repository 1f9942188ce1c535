"""
Package entry point.

Allows running the application via:

    python -m gradeplanner

This simply forwards execution to gradeplanner.cli.main().
"""

from gradeplanner.cli import main

if __name__ == "__main__":
    main()
