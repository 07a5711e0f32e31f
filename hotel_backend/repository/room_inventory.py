"""Read-only room inventory seeded once at startup."""

from __future__ import annotations

from typing import Iterable, Optional

from hotel_backend.domain.constraints import parse_room_layout
from hotel_backend.domain.models import Room
from hotel_backend.utils.config import Settings, get_settings


class RoomInventory:
    """Owns every Room; the rest of the system only reads from it."""

    def __init__(self, rooms: Iterable[Room]) -> None:
        ordered = sorted(rooms, key=lambda room: room.number)
        numbers = [room.number for room in ordered]
        if len(numbers) != len(set(numbers)):
            raise ValueError("room numbers must be unique")
        self._rooms: tuple[Room, ...] = tuple(ordered)
        self._by_number = {room.number: room for room in self._rooms}

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RoomInventory":
        resolved = settings or get_settings()
        return cls(parse_room_layout(resolved.room_layout))

    def list_rooms(self) -> list[Room]:
        return list(self._rooms)

    def rooms_of_type(self, room_type: str) -> list[Room]:
        return [room for room in self._rooms if room.room_type == room_type]

    def get_room(self, number: int) -> Room | None:
        return self._by_number.get(number)

    def room_types(self) -> list[str]:
        seen: dict[str, None] = {}
        for room in self._rooms:
            seen.setdefault(room.room_type, None)
        return list(seen)
