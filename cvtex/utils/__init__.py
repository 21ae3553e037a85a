"""
Shared utilities for cvtex.

Common functionality used across contexts:
- Logger setup
- Text processing
- Timestamps
"""

from cvtex.utils.timestamp import today

__all__ = ["today"]
