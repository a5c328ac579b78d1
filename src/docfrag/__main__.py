"""
Main entry point for the docfrag CLI.

This module serves as the entry point when running the package as a module:
    python -m docfrag

or after installation:
    docfrag
"""

from .core.cli import main

if __name__ == "__main__":
    main()
