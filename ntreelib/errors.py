"""Exceptions raised by NTreeLib.

The functional API never raises for bad arguments; it returns a sentinel
instead. These exceptions are only raised on explicit opt-in paths.
"""

from typing import List, Optional


class TraversalConfigError(ValueError):
    """Raised when a traversal configuration cannot be executed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]
