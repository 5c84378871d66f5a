"""Exception hierarchy for fare estimation and trip tracking."""

from typing import Any


class GoTripError(Exception):
    """Base exception for all gotrip errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermanentError(GoTripError):
    """Errors that will not succeed on retry."""

    pass


class InvalidInput(PermanentError):
    """Invalid input such as missing or out-of-range coordinates."""

    pass


class InvalidTransition(PermanentError):
    """Trigger not legal from the trip's current status."""

    pass


class ActiveTripExists(PermanentError):
    """Requester already has a non-terminal trip."""

    pass


class NotFoundError(PermanentError):
    """Requested entity does not exist."""

    pass


class EmptyPricingSource(GoTripError):
    """No active price configuration available.

    Always handled by the estimator, which falls back to the built-in table.
    """

    pass
