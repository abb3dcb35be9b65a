"""Top-level package for grg.

This package turns repository addresses into ``require`` lines by inspecting
their tags and commit history.
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "core",
]
