#!/usr/bin/env python3
"""Validate local reservation-manager environment readiness."""

from __future__ import annotations

import importlib
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hotel_backend.domain.errors import InvalidTransitionError
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.utils.config import get_settings

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True

    # CHECK 1 — Python version >= 3.10
    if sys.version_info >= (3, 10):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.10",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2 — Required packages importable with versions
    package_specs = [
        ("fastapi", "fastapi"),
        ("uvicorn", "uvicorn"),
        ("pydantic", "pydantic"),
        ("httpx", "httpx"),
        ("pytest", "pytest"),
    ]
    import_errors: list[str] = []
    from importlib.metadata import version

    for module_name, dist_name in package_specs:
        try:
            importlib.import_module(module_name)
            _ = version(dist_name)
        except Exception as exc:  # pragma: no cover - runtime guard
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    else:
        ok, line = _print_result("Required packages: all importable", True)
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 3 — Settings and inventory
    service = None
    try:
        settings = replace(get_settings(), staff_accounts=())
        service = HotelService(settings=settings)
        room_count = len(service.list_rooms())
        ok, line = _print_result("Room inventory", True, f": {room_count} rooms")
    except Exception as exc:
        ok, line = _print_result("Room inventory", False, str(exc))
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 4 — Reservation lifecycle smoke run
    if service is not None:
        try:
            room_type = service.inventory.room_types()[0]
            reservation = service.create_reservation(
                "Validation Guest",
                room_type,
                date(2030, 1, 1),
                date(2030, 1, 3),
            )
            service.check_in(reservation.reservation_id)
            try:
                service.cancel(reservation.reservation_id)
                raise RuntimeError("cancel succeeded on a checked-in reservation")
            except InvalidTransitionError:
                pass
            service.check_out(reservation.reservation_id)
            ok, line = _print_result(
                "Reservation lifecycle",
                True,
                f": id={reservation.reservation_id} room={reservation.room_number}",
            )
        except Exception as exc:
            ok, line = _print_result("Reservation lifecycle", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

    print(SEPARATOR_LINE)
    print(" Hotel Reservation Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
