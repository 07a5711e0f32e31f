from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from hotel_backend.domain.errors import ValidationError
from hotel_backend.domain.models import Room
from hotel_backend.repository.room_inventory import RoomInventory
from hotel_backend.services.hotel_service import HotelService


def test_inventory_lists_default_rooms_in_number_order(hotel: HotelService) -> None:
    rooms = hotel.list_rooms()
    assert [room.number for room in rooms] == [
        101, 102, 103, 104, 105,
        201, 202, 203, 204, 205, 206,
        301, 302, 303,
    ]
    assert hotel.inventory.room_types() == ["Single", "Double", "Suite"]
    assert hotel.inventory.get_room(202) == Room(number=202, room_type="Double")
    assert hotel.inventory.get_room(999) is None


def test_inventory_rejects_duplicate_numbers() -> None:
    with pytest.raises(ValueError):
        RoomInventory([Room(101, "Single"), Room(101, "Double")])


def test_list_rooms_returns_a_copy(hotel: HotelService) -> None:
    rooms = hotel.list_rooms()
    rooms.clear()
    assert len(hotel.list_rooms()) == 14


def test_lowest_numbered_free_room_is_chosen(hotel: HotelService) -> None:
    room = hotel.find_available_room("Double", date(2024, 6, 1), date(2024, 6, 3))
    assert room == Room(number=201, room_type="Double")


def test_overlapping_active_reservation_skips_room(hotel: HotelService) -> None:
    hotel.create_reservation("Alice", "Suite", date(2024, 6, 1), date(2024, 6, 5))
    room = hotel.find_available_room("Suite", date(2024, 6, 4), date(2024, 6, 6))
    assert room is not None
    assert room.number == 302


def test_turnover_day_keeps_room_available(hotel: HotelService) -> None:
    hotel.create_reservation("Alice", "Suite", date(2024, 6, 1), date(2024, 6, 5))
    assert hotel.find_available_room("Suite", date(2024, 6, 5), date(2024, 6, 7)).number == 301
    assert hotel.find_available_room("Suite", date(2024, 5, 28), date(2024, 6, 1)).number == 301


def test_fully_booked_type_returns_none(hotel: HotelService) -> None:
    for guest in ("A", "B", "C"):
        hotel.create_reservation(guest, "Suite", date(2024, 6, 1), date(2024, 6, 5))
    assert hotel.find_available_room("Suite", date(2024, 6, 2), date(2024, 6, 3)) is None
    assert hotel.list_available_rooms("Suite", date(2024, 6, 2), date(2024, 6, 3)) == []


def test_no_partial_assignment_across_rooms(hotel: HotelService) -> None:
    """Each Suite is free for part of the window, none for the whole of it."""
    hotel.create_reservation("A", "Suite", date(2024, 6, 1), date(2024, 6, 3))
    hotel.create_reservation("B", "Suite", date(2024, 6, 1), date(2024, 6, 3))
    hotel.create_reservation("C", "Suite", date(2024, 6, 1), date(2024, 6, 3))
    hotel.create_reservation("D", "Suite", date(2024, 6, 3), date(2024, 6, 6))
    hotel.create_reservation("E", "Suite", date(2024, 6, 3), date(2024, 6, 6))
    hotel.create_reservation("F", "Suite", date(2024, 6, 3), date(2024, 6, 6))
    assert hotel.find_available_room("Suite", date(2024, 6, 2), date(2024, 6, 4)) is None


def test_cancelled_and_checked_out_reservations_free_the_room(hotel: HotelService) -> None:
    first = hotel.create_reservation("Alice", "Suite", date(2024, 6, 1), date(2024, 6, 5))
    second = hotel.create_reservation("Bob", "Suite", date(2024, 6, 1), date(2024, 6, 5))
    hotel.cancel(first.reservation_id)
    hotel.check_in(second.reservation_id)
    hotel.check_out(second.reservation_id)

    free = hotel.list_available_rooms("Suite", date(2024, 6, 2), date(2024, 6, 3))
    assert [room.number for room in free] == [301, 302, 303]


def test_checked_in_reservation_still_blocks_room(hotel: HotelService) -> None:
    reservation = hotel.create_reservation("Alice", "Suite", date(2024, 6, 1), date(2024, 6, 5))
    hotel.check_in(reservation.reservation_id)
    free = hotel.list_available_rooms("Suite", date(2024, 6, 2), date(2024, 6, 3))
    assert [room.number for room in free] == [302, 303]


def test_unknown_room_type_has_no_candidates(hotel: HotelService) -> None:
    assert hotel.find_available_room("Penthouse", date(2024, 6, 1), date(2024, 6, 2)) is None


def test_room_type_match_is_exact(hotel: HotelService) -> None:
    assert hotel.find_available_room("suite", date(2024, 6, 1), date(2024, 6, 2)) is None


def test_invalid_window_is_rejected_before_scanning(hotel: HotelService) -> None:
    with pytest.raises(ValidationError):
        hotel.find_available_room("Single", date(2024, 6, 3), date(2024, 6, 3))


def test_new_room_type_only_requires_inventory_change(settings) -> None:
    hotel = HotelService(settings=replace(settings, room_layout="Single:101,Loft:501-502"))
    room = hotel.find_available_room("Loft", date(2024, 6, 1), date(2024, 6, 2))
    assert room == Room(number=501, room_type="Loft")
