"""Room availability resolution over the fixed inventory."""

from __future__ import annotations

from datetime import date

from hotel_backend.domain.constraints import stays_overlap, validate_stay
from hotel_backend.domain.models import Room
from hotel_backend.repository.reservation_repository import ReservationRepository
from hotel_backend.repository.room_inventory import RoomInventory
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class AvailabilityService:
    """Finds rooms of a type with no active reservation clashing with a stay.

    Candidates are scanned in ascending room number, so the assigned room is
    deterministic: the lowest-numbered free room of the type.
    """

    def __init__(self, inventory: RoomInventory, repository: ReservationRepository) -> None:
        self._inventory = inventory
        self._repository = repository

    def is_room_free(self, room: Room, check_in: date, check_out: date) -> bool:
        for reservation in self._repository.list_active_for_room(room.number):
            if stays_overlap(check_in, check_out, reservation.check_in, reservation.check_out):
                return False
        return True

    def find_available_room(self, room_type: str, check_in: date, check_out: date) -> Room | None:
        validate_stay(check_in, check_out)
        with self._repository.lock:
            for room in self._inventory.rooms_of_type(room_type):
                if self.is_room_free(room, check_in, check_out):
                    return room
        logger.info(
            "No free room | room_type=%s | check_in=%s | check_out=%s",
            room_type,
            check_in,
            check_out,
        )
        return None

    def list_available_rooms(self, room_type: str, check_in: date, check_out: date) -> list[Room]:
        validate_stay(check_in, check_out)
        with self._repository.lock:
            return [
                room
                for room in self._inventory.rooms_of_type(room_type)
                if self.is_room_free(room, check_in, check_out)
            ]
