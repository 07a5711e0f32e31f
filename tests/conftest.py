from __future__ import annotations

from dataclasses import replace

import pytest

from hotel_backend.utils.config import Settings, StaffAccount, get_settings
from hotel_backend.services.hotel_service import HotelService


@pytest.fixture
def settings() -> Settings:
    get_settings.cache_clear()
    base = get_settings()
    return replace(
        base,
        room_layout="Single:101-105,Double:201-206,Suite:301-303",
        reservation_id_base=1001,
        staff_accounts=(
            StaffAccount(username="admin", password="admin", role="manager"),
            StaffAccount(username="staff", password="staff", role="staff"),
        ),
    )


@pytest.fixture
def hotel(settings: Settings) -> HotelService:
    return HotelService(settings=settings)
