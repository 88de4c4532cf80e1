# -------------------------------------
# explode CLI entry point
# -------------------------------------
"""
Usage:
    python -m explode 'a{b,c}d'
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
