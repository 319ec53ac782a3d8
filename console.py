# console.py
"""
Thin entrypoint for the students console.

Usage example:
    python console.py
    python console.py --no-interactive
"""

from studentdb.main import main

if __name__ == "__main__":
    raise SystemExit(main())
