"""In-memory reservation store with monotonic id allocation."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from threading import RLock
from typing import Optional

from hotel_backend.domain.models import Reservation, ReservationStatus
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class ReservationRepository:
    """Append-only reservation collection.

    Entries are never removed; a status change swaps the stored frozen
    instance for an updated copy. ``lock`` is exposed so services can make a
    check-then-write sequence atomic.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._next_id = self._settings.reservation_id_base
        self._reservations: dict[int, Reservation] = {}
        self.lock = RLock()

    def add(
        self,
        *,
        guest_name: str,
        room_number: int,
        room_type: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        with self.lock:
            reservation = Reservation(
                reservation_id=self._next_id,
                guest_name=guest_name,
                room_number=room_number,
                room_type=room_type,
                check_in=check_in,
                check_out=check_out,
                status=ReservationStatus.RESERVED,
            )
            self._reservations[reservation.reservation_id] = reservation
            self._next_id += 1
        logger.debug("Reservation stored | reservation_id=%s", reservation.reservation_id)
        return reservation

    def update_status(self, reservation_id: int, status: ReservationStatus) -> Reservation:
        with self.lock:
            updated = replace(self._reservations[reservation_id], status=status)
            self._reservations[reservation_id] = updated
        return updated

    def get(self, reservation_id: int) -> Reservation | None:
        return self._reservations.get(reservation_id)

    def list_all(self) -> list[Reservation]:
        with self.lock:
            return list(self._reservations.values())

    def list_active_for_room(self, room_number: int) -> list[Reservation]:
        with self.lock:
            return [
                reservation
                for reservation in self._reservations.values()
                if reservation.room_number == room_number and reservation.status.is_active
            ]

    def count(self) -> int:
        return len(self._reservations)

    @property
    def next_id(self) -> int:
        return self._next_id
