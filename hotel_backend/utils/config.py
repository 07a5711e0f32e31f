"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_ROOM_LAYOUT = "Single:101-105,Double:201-206,Suite:301-303"
DEFAULT_STAFF_ACCOUNTS = "admin:admin:manager,staff:staff:staff"


@dataclass(frozen=True)
class StaffAccount:
    username: str
    password: str
    role: str


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    host: str
    port: int
    room_layout: str
    reservation_id_base: int
    staff_accounts: tuple[StaffAccount, ...]


def parse_staff_accounts(raw_value: str) -> tuple[StaffAccount, ...]:
    """Parse ``user:password:role`` entries separated by commas.

    The role part is optional and defaults to ``staff``. An empty string
    disables authentication entirely.
    """
    accounts: list[StaffAccount] = []
    for entry in raw_value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        parts = entry.split(":")
        if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
            raise ValueError(f"staff account entry is malformed: {entry!r}")
        role = parts[2] if len(parts) == 3 and parts[2] else "staff"
        accounts.append(StaffAccount(username=parts[0], password=parts[1], role=role))
    return tuple(accounts)


def _int_from_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process from environment variables."""
    reservation_id_base = _int_from_env("HOTEL_RESERVATION_ID_BASE", 1001)
    if reservation_id_base <= 0:
        raise ValueError("HOTEL_RESERVATION_ID_BASE must be > 0")

    return Settings(
        app_name=os.getenv("APP_NAME", "Hotel Reservation Manager"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int_from_env("PORT", 8000),
        room_layout=os.getenv("HOTEL_ROOM_LAYOUT", DEFAULT_ROOM_LAYOUT),
        reservation_id_base=reservation_id_base,
        staff_accounts=parse_staff_accounts(
            os.getenv("HOTEL_STAFF_ACCOUNTS", DEFAULT_STAFF_ACCOUNTS)
        ),
    )
