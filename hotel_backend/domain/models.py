"""Domain models for room inventory and reservations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    RESERVED = "Reserved"
    CHECKED_IN = "Checked-in"
    CHECKED_OUT = "Checked-out"
    CANCELLED = "Cancelled"

    @property
    def is_active(self) -> bool:
        """Active reservations are the only ones that block a room."""
        return self in (ReservationStatus.RESERVED, ReservationStatus.CHECKED_IN)


@dataclass(frozen=True)
class Room:
    number: int
    room_type: str


@dataclass(frozen=True)
class Reservation:
    reservation_id: int
    guest_name: str
    room_number: int
    room_type: str
    check_in: date
    check_out: date
    status: ReservationStatus = ReservationStatus.RESERVED

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def search_text(self) -> str:
        return " ".join(
            (
                str(self.reservation_id),
                self.guest_name,
                str(self.room_number),
                self.room_type,
                self.status.value,
                self.check_in.isoformat(),
                self.check_out.isoformat(),
            )
        )
