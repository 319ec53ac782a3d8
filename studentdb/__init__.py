# studentdb/__init__.py
"""
Package entrypoint for the students console.

This lets us run:
    python -m studentdb
"""

from .main import main

__all__ = ["main"]
