"""Module entrypoint.

Allows:
    python -m record_checker
"""

from __future__ import annotations

from record_checker.cli import main

if __name__ == "__main__":
    main()
