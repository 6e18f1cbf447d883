"""
Error taxonomy for the finance API.

Every error a handler raises on purpose derives from ``FinanceAPIError`` and is
rendered as ``{"error": message}`` with its ``status_code``.
"""


class FinanceAPIError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(FinanceAPIError):
    """Client input rejected: duplicate email, bad credentials."""

    status_code = 400


class Unauthenticated(FinanceAPIError):
    """No caller identity could be established for the request."""

    status_code = 401


class InvalidToken(Exception):
    """Raised by the token service for a forged, malformed or expired token."""
