"""
Package entry point.

Allows running the application via:

    python -m slugplan

This simply forwards execution to slugplan.cli.main().
"""

from slugplan.cli import main

if __name__ == "__main__":
    main()
