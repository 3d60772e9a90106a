"""
Error taxonomy for the Linear-backed initiative source.

Configuration problems are raised before any network attempt; transport and
protocol failures both surface as `FetchError` so the presentation layer can
catch a single type and render its degraded state.
"""

from __future__ import annotations

from typing import Optional


class InitiativeSourceError(Exception):
    """Base exception for initiative data access errors"""


class ConfigurationError(InitiativeSourceError):
    """Raised when a required setting (e.g. the API key) is missing"""


class FetchError(InitiativeSourceError):
    """Raised when the remote query does not produce usable data"""


class TransportError(FetchError):
    """Raised on a non-success HTTP response or a failed connection"""

    def __init__(self, status_code: Optional[int], reason: str):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            super().__init__(f"Linear API error: {reason}")
        else:
            super().__init__(f"Linear API error: {status_code} {reason}")


class ProtocolError(FetchError):
    """Raised when a successful response carries a GraphQL `errors` payload"""

    def __init__(self, message: Optional[str]):
        self.message = message
        super().__init__(f"Linear GraphQL error: {message}")
