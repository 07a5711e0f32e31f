"""Domain-level validation rules for stays and room layouts."""

from __future__ import annotations

from datetime import date, datetime

from hotel_backend.domain.errors import ValidationError
from hotel_backend.domain.models import Room


def stays_overlap(
    check_in: date,
    check_out: date,
    other_check_in: date,
    other_check_out: date,
) -> bool:
    """Half-open ``[check_in, check_out)`` overlap; turnover days never clash."""
    return not (check_out <= other_check_in or check_in >= other_check_out)


def _is_calendar_date(value: object) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def validate_stay(check_in: date, check_out: date) -> None:
    if not _is_calendar_date(check_in) or not _is_calendar_date(check_out):
        raise ValidationError("check_in and check_out must be calendar dates without a time")
    if check_out <= check_in:
        raise ValidationError("Check-out date must be after check-in date")


def validate_guest_name(guest_name: str) -> str:
    if not isinstance(guest_name, str) or not guest_name.strip():
        raise ValidationError("Guest name is required")
    return guest_name.strip()


def parse_room_layout(layout: str) -> list[Room]:
    """Expand ``Type:first-last`` blocks into rooms sorted by number."""
    rooms: dict[int, Room] = {}
    for block in layout.split(","):
        block = block.strip()
        if not block:
            continue
        room_type, separator, number_range = block.partition(":")
        room_type = room_type.strip()
        if not separator or not room_type:
            raise ValueError(f"room layout block is malformed: {block!r}")

        first, _, last = number_range.partition("-")
        try:
            first_number = int(first)
            last_number = int(last) if last else first_number
        except ValueError as exc:
            raise ValueError(f"room layout range is malformed: {block!r}") from exc
        if first_number <= 0 or last_number < first_number:
            raise ValueError(f"room layout range is invalid: {block!r}")

        for number in range(first_number, last_number + 1):
            if number in rooms:
                raise ValueError(f"room number {number} is declared twice")
            rooms[number] = Room(number=number, room_type=room_type)

    if not rooms:
        raise ValueError("room layout must declare at least one room")
    return [rooms[number] for number in sorted(rooms)]
