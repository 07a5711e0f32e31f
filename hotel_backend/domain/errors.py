"""Error taxonomy shared by the reservation core services."""

from __future__ import annotations


class ReservationError(Exception):
    """Base class for every expected reservation-core failure."""


class ValidationError(ReservationError):
    """Raised when guest or stay inputs are malformed."""


class NoAvailabilityError(ReservationError):
    """Raised when no room of the requested type is free for the stay."""


class NotFoundError(ReservationError):
    """Raised when a reservation id does not exist."""


class InvalidTransitionError(ReservationError):
    """Raised when an operation is not legal from the current status."""
