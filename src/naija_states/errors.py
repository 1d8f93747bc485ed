"""
Exceptions raised by state lookups.
"""


class NaijaStatesError(Exception):
    """Base class for lookup failures."""


class InvalidInput(NaijaStatesError, ValueError):
    """Raised when a query is empty once surrounding whitespace is removed."""

    def __init__(self, query: str | None = None):
        self.query = query
        super().__init__("Invalid Nigeria State")


class StateNotFound(NaijaStatesError, LookupError):
    """Raised when no state matches the query."""

    def __init__(self, query: str):
        # Keep the caller's text as-is for diagnostics
        self.query = query
        super().__init__(f'State "{query}" not found')
