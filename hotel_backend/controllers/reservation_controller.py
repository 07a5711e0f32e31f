"""HTTP controller layer for rooms and reservations."""

from __future__ import annotations

from datetime import date
from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from hotel_backend.controllers.dependencies import get_hotel_service, require_staff
from hotel_backend.domain import errors
from hotel_backend.domain.models import Reservation, ReservationStatus, Room
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["reservations"], dependencies=[Depends(require_staff)])


_STATUS_BY_ERROR: dict[type[errors.ReservationError], int] = {
    errors.ValidationError: status.HTTP_400_BAD_REQUEST,
    errors.NotFoundError: status.HTTP_404_NOT_FOUND,
    errors.NoAvailabilityError: status.HTTP_409_CONFLICT,
    errors.InvalidTransitionError: status.HTTP_409_CONFLICT,
}


class RoomResponse(BaseModel):
    number: int = Field(gt=0)
    room_type: str

    @classmethod
    def from_room(cls, room: Room) -> "RoomResponse":
        return cls(number=room.number, room_type=room.room_type)


class CreateReservationRequest(BaseModel):
    """Input DTO; date ordering and guest name are checked by the core."""

    guest_name: str
    room_type: str = Field(min_length=1)
    check_in: date
    check_out: date


class ReservationResponse(BaseModel):
    reservation_id: int = Field(gt=0)
    guest_name: str
    room_number: int = Field(gt=0)
    room_type: str
    check_in: date
    check_out: date
    status: ReservationStatus
    nights: int = Field(gt=0)

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationResponse":
        return cls(
            reservation_id=reservation.reservation_id,
            guest_name=reservation.guest_name,
            room_number=reservation.room_number,
            room_type=reservation.room_type,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            status=reservation.status,
            nights=reservation.nights,
        )


class ReservationDetailsResponse(BaseModel):
    reservation_id: int
    details: str


def _raise_http_error(exc: errors.ReservationError) -> NoReturn:
    raise HTTPException(
        status_code=_STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST),
        detail=str(exc),
    ) from exc


@router.get("/rooms", response_model=list[RoomResponse])
async def list_rooms(
    service: HotelService = Depends(get_hotel_service),
) -> list[RoomResponse]:
    return [RoomResponse.from_room(room) for room in service.list_rooms()]


@router.get("/rooms/available", response_model=list[RoomResponse])
async def list_available_rooms(
    room_type: str = Query(min_length=1),
    check_in: date = Query(),
    check_out: date = Query(),
    service: HotelService = Depends(get_hotel_service),
) -> list[RoomResponse]:
    try:
        rooms = service.list_available_rooms(room_type, check_in, check_out)
    except errors.ReservationError as exc:
        _raise_http_error(exc)
    return [RoomResponse.from_room(room) for room in rooms]


@router.get("/reservations", response_model=list[ReservationResponse])
async def list_reservations(
    q: Optional[str] = Query(default=None),
    service: HotelService = Depends(get_hotel_service),
) -> list[ReservationResponse]:
    """List every reservation, or only those matching the free-text query."""
    return [ReservationResponse.from_reservation(item) for item in service.search(q)]


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    payload: CreateReservationRequest,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationResponse:
    try:
        reservation = service.create_reservation(
            payload.guest_name,
            payload.room_type,
            payload.check_in,
            payload.check_out,
        )
    except errors.ReservationError as exc:
        _raise_http_error(exc)
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected reservation failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create reservation",
        ) from exc
    return ReservationResponse.from_reservation(reservation)


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationResponse:
    try:
        return ReservationResponse.from_reservation(service.get_by_id(reservation_id))
    except errors.ReservationError as exc:
        _raise_http_error(exc)


@router.get(
    "/reservations/{reservation_id}/details",
    response_model=ReservationDetailsResponse,
)
async def get_reservation_details(
    reservation_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationDetailsResponse:
    try:
        details = service.describe(reservation_id)
    except errors.ReservationError as exc:
        _raise_http_error(exc)
    return ReservationDetailsResponse(reservation_id=reservation_id, details=details)


@router.post("/reservations/{reservation_id}/check-in", response_model=ReservationResponse)
async def check_in(
    reservation_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationResponse:
    try:
        return ReservationResponse.from_reservation(service.check_in(reservation_id))
    except errors.ReservationError as exc:
        _raise_http_error(exc)


@router.post("/reservations/{reservation_id}/check-out", response_model=ReservationResponse)
async def check_out(
    reservation_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationResponse:
    try:
        return ReservationResponse.from_reservation(service.check_out(reservation_id))
    except errors.ReservationError as exc:
        _raise_http_error(exc)


@router.post("/reservations/{reservation_id}/cancel", response_model=ReservationResponse)
async def cancel(
    reservation_id: int,
    service: HotelService = Depends(get_hotel_service),
) -> ReservationResponse:
    try:
        return ReservationResponse.from_reservation(service.cancel(reservation_id))
    except errors.ReservationError as exc:
        _raise_http_error(exc)
