"""
Entry point for running the Stringy CLI as a module.

Usage:
    python -m stringy camelize "foo bar"
"""

import sys

from stringy.cli import main

if __name__ == "__main__":
    sys.exit(main())
