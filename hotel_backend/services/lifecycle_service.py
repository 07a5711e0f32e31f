"""Reservation creation and status transitions."""

from __future__ import annotations

from datetime import date

from hotel_backend.domain.constraints import validate_guest_name, validate_stay
from hotel_backend.domain.errors import (
    InvalidTransitionError,
    NoAvailabilityError,
    NotFoundError,
)
from hotel_backend.domain.models import Reservation, ReservationStatus
from hotel_backend.repository.reservation_repository import ReservationRepository
from hotel_backend.services.availability_service import AvailabilityService
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


# target status -> statuses it may be entered from
ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.RESERVED: frozenset(),
    ReservationStatus.CHECKED_IN: frozenset({ReservationStatus.RESERVED}),
    ReservationStatus.CHECKED_OUT: frozenset({ReservationStatus.CHECKED_IN}),
    ReservationStatus.CANCELLED: frozenset(
        {ReservationStatus.RESERVED, ReservationStatus.CHECKED_OUT}
    ),
}

_REJECTION_MESSAGES: dict[ReservationStatus, str] = {
    ReservationStatus.RESERVED: "Reservations cannot return to the reserved state",
    ReservationStatus.CHECKED_IN: "Only reserved bookings can be checked in",
    ReservationStatus.CHECKED_OUT: "Only checked-in bookings can be checked out",
    ReservationStatus.CANCELLED: "Cannot cancel a checked-in or already cancelled reservation",
}


def assert_transition(current: ReservationStatus, target: ReservationStatus) -> None:
    if current not in ALLOWED_TRANSITIONS[target]:
        raise InvalidTransitionError(
            f"{_REJECTION_MESSAGES[target]} (current status: {current.value})"
        )


class ReservationLifecycleService:
    """Creates reservations and moves them through check-in, check-out and cancel."""

    def __init__(
        self,
        repository: ReservationRepository,
        availability_service: AvailabilityService,
    ) -> None:
        self._repository = repository
        self._availability_service = availability_service

    def create(
        self,
        *,
        guest_name: str,
        room_type: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        guest = validate_guest_name(guest_name)
        validate_stay(check_in, check_out)

        with self._repository.lock:
            room = self._availability_service.find_available_room(room_type, check_in, check_out)
            if room is None:
                logger.warning(
                    "Reservation rejected | guest=%s | room_type=%s | reason=no_availability",
                    guest,
                    room_type,
                )
                raise NoAvailabilityError(
                    f"No available {room_type} rooms for the selected dates"
                )
            reservation = self._repository.add(
                guest_name=guest,
                room_number=room.number,
                room_type=room.room_type,
                check_in=check_in,
                check_out=check_out,
            )

        logger.info(
            "Reservation created | reservation_id=%s | room_number=%s | check_in=%s | check_out=%s",
            reservation.reservation_id,
            reservation.room_number,
            reservation.check_in,
            reservation.check_out,
        )
        return reservation

    def check_in(self, reservation_id: int) -> Reservation:
        return self._transition(reservation_id, ReservationStatus.CHECKED_IN)

    def check_out(self, reservation_id: int) -> Reservation:
        return self._transition(reservation_id, ReservationStatus.CHECKED_OUT)

    def cancel(self, reservation_id: int) -> Reservation:
        return self._transition(reservation_id, ReservationStatus.CANCELLED)

    def _transition(self, reservation_id: int, target: ReservationStatus) -> Reservation:
        with self._repository.lock:
            current = self._repository.get(reservation_id)
            if current is None:
                raise NotFoundError(f"Reservation {reservation_id} not found")
            try:
                assert_transition(current.status, target)
            except InvalidTransitionError:
                logger.warning(
                    "Transition rejected | reservation_id=%s | from=%s | to=%s",
                    reservation_id,
                    current.status.value,
                    target.value,
                )
                raise
            updated = self._repository.update_status(reservation_id, target)

        logger.info(
            "Reservation status changed | reservation_id=%s | room_number=%s | from=%s | to=%s",
            reservation_id,
            updated.room_number,
            current.status.value,
            target.value,
        )
        return updated
