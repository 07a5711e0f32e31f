"""Hotel context: one inventory, one reservation store and the services over them."""

from __future__ import annotations

from datetime import date
from typing import Optional

from hotel_backend.domain.models import Reservation, Room
from hotel_backend.repository.reservation_repository import ReservationRepository
from hotel_backend.repository.room_inventory import RoomInventory
from hotel_backend.services.availability_service import AvailabilityService
from hotel_backend.services.lifecycle_service import ReservationLifecycleService
from hotel_backend.services.query_service import ReservationQueryService
from hotel_backend.utils.config import Settings, get_settings


class HotelService:
    """Entry point the presentation layer calls for every core operation.

    Each instance is an independent hotel; nothing is shared between
    instances, so tests and callers can hold as many as they need.
    """

    def __init__(
        self,
        inventory: Optional[RoomInventory] = None,
        repository: Optional[ReservationRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._inventory = inventory or RoomInventory.from_settings(self._settings)
        self._repository = repository or ReservationRepository(self._settings)
        self._availability_service = AvailabilityService(
            inventory=self._inventory,
            repository=self._repository,
        )
        self._lifecycle_service = ReservationLifecycleService(
            repository=self._repository,
            availability_service=self._availability_service,
        )
        self._query_service = ReservationQueryService(repository=self._repository)

    @property
    def inventory(self) -> RoomInventory:
        return self._inventory

    @property
    def repository(self) -> ReservationRepository:
        return self._repository

    def list_rooms(self) -> list[Room]:
        return self._inventory.list_rooms()

    def find_available_room(self, room_type: str, check_in: date, check_out: date) -> Room | None:
        return self._availability_service.find_available_room(room_type, check_in, check_out)

    def list_available_rooms(self, room_type: str, check_in: date, check_out: date) -> list[Room]:
        return self._availability_service.list_available_rooms(room_type, check_in, check_out)

    def create_reservation(
        self,
        guest_name: str,
        room_type: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        return self._lifecycle_service.create(
            guest_name=guest_name,
            room_type=room_type,
            check_in=check_in,
            check_out=check_out,
        )

    def check_in(self, reservation_id: int) -> Reservation:
        return self._lifecycle_service.check_in(reservation_id)

    def check_out(self, reservation_id: int) -> Reservation:
        return self._lifecycle_service.check_out(reservation_id)

    def cancel(self, reservation_id: int) -> Reservation:
        return self._lifecycle_service.cancel(reservation_id)

    def list_all(self) -> list[Reservation]:
        return self._query_service.list_all()

    def search(self, query: str | None) -> list[Reservation]:
        return self._query_service.search(query)

    def get_by_id(self, reservation_id: int) -> Reservation:
        return self._query_service.get_by_id(reservation_id)

    def describe(self, reservation_id: int) -> str:
        return self._query_service.describe(self._query_service.get_by_id(reservation_id))
