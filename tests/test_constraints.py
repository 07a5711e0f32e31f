"""Tests for stay validation, overlap detection and room layout parsing."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from hotel_backend.domain.constraints import (
    parse_room_layout,
    stays_overlap,
    validate_guest_name,
    validate_stay,
)
from hotel_backend.domain.errors import ValidationError
from hotel_backend.domain.models import Room


JUNE_1 = date(2024, 6, 1)
JUNE_3 = date(2024, 6, 3)
JUNE_5 = date(2024, 6, 5)


# --- stays_overlap ---

def test_identical_stays_overlap() -> None:
    assert stays_overlap(JUNE_1, JUNE_3, JUNE_1, JUNE_3)


def test_partial_overlap_detected_both_ways() -> None:
    assert stays_overlap(JUNE_1, JUNE_3, date(2024, 6, 2), date(2024, 6, 4))
    assert stays_overlap(date(2024, 6, 2), date(2024, 6, 4), JUNE_1, JUNE_3)


def test_contained_stay_overlaps() -> None:
    assert stays_overlap(JUNE_1, JUNE_5, date(2024, 6, 2), JUNE_3)


def test_turnover_day_is_not_an_overlap() -> None:
    """Checkout morning of one stay may be the check-in day of the next."""
    assert not stays_overlap(JUNE_1, JUNE_3, JUNE_3, JUNE_5)
    assert not stays_overlap(JUNE_3, JUNE_5, JUNE_1, JUNE_3)


def test_disjoint_stays_do_not_overlap() -> None:
    assert not stays_overlap(JUNE_1, JUNE_3, date(2024, 6, 10), date(2024, 6, 12))


# --- validate_stay ---

def test_valid_stay_passes() -> None:
    validate_stay(JUNE_1, JUNE_3)


def test_checkout_before_checkin_raises() -> None:
    with pytest.raises(ValidationError):
        validate_stay(date(2024, 7, 10), date(2024, 7, 9))


def test_zero_length_stay_raises() -> None:
    with pytest.raises(ValidationError):
        validate_stay(JUNE_1, JUNE_1)


def test_non_date_values_raise() -> None:
    with pytest.raises(ValidationError):
        validate_stay("2024-06-01", "2024-06-03")  # type: ignore[arg-type]


def test_timestamped_values_raise() -> None:
    with pytest.raises(ValidationError):
        validate_stay(datetime(2024, 6, 1, 14), datetime(2024, 6, 3, 11))


def test_mixed_date_and_timestamp_raise() -> None:
    with pytest.raises(ValidationError):
        validate_stay(JUNE_1, datetime(2024, 6, 3, 11))
    with pytest.raises(ValidationError):
        validate_stay(datetime(2024, 6, 1, 14), JUNE_3)


# --- validate_guest_name ---

def test_guest_name_is_trimmed() -> None:
    assert validate_guest_name("  Alice ") == "Alice"


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_blank_guest_name_raises(value: str) -> None:
    with pytest.raises(ValidationError):
        validate_guest_name(value)


# --- parse_room_layout ---

def test_default_layout_expands_in_room_number_order() -> None:
    rooms = parse_room_layout("Suite:301-303,Single:101-105,Double:201-206")
    assert len(rooms) == 14
    assert rooms[0] == Room(number=101, room_type="Single")
    assert rooms[-1] == Room(number=303, room_type="Suite")
    assert [room.number for room in rooms] == sorted(room.number for room in rooms)


def test_single_room_block() -> None:
    assert parse_room_layout("Penthouse:900") == [Room(number=900, room_type="Penthouse")]


def test_duplicate_room_number_raises() -> None:
    with pytest.raises(ValueError):
        parse_room_layout("Single:101-103,Double:103-104")


@pytest.mark.parametrize("layout", ["", "Single", "Single:abc", "Single:105-101", ":101-102"])
def test_malformed_layout_raises(layout: str) -> None:
    with pytest.raises(ValueError):
        parse_room_layout(layout)
