"""Application Entry Point - Root Module.

This is the root-level entry point. It imports from the src package.
"""

from src.main import run, show_earthquake

__all__ = [
    "run",
    "show_earthquake",
]


if __name__ == "__main__":
    raise SystemExit(run())
