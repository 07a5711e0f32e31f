"""Read-only listing, lookup and free-text search over reservations."""

from __future__ import annotations

from hotel_backend.domain.errors import NotFoundError
from hotel_backend.domain.models import Reservation
from hotel_backend.repository.reservation_repository import ReservationRepository


class ReservationQueryService:
    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def list_all(self) -> list[Reservation]:
        return self._repository.list_all()

    def get_by_id(self, reservation_id: int) -> Reservation:
        reservation = self._repository.get(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found")
        return reservation

    def search(self, query: str | None) -> list[Reservation]:
        """Case-insensitive substring match over id, guest, room, type, status and dates.

        A blank query is no filter at all.
        """
        if query is None or not query.strip():
            return self.list_all()
        needle = query.lower()
        return [
            reservation
            for reservation in self._repository.list_all()
            if needle in reservation.search_text().lower()
        ]

    @staticmethod
    def describe(reservation: Reservation) -> str:
        return "\n".join(
            (
                f"ID: {reservation.reservation_id}",
                f"Guest: {reservation.guest_name}",
                f"Room: {reservation.room_number}",
                f"Type: {reservation.room_type}",
                f"Check-in: {reservation.check_in.isoformat()}",
                f"Check-out: {reservation.check_out.isoformat()}",
                f"Status: {reservation.status.value}",
            )
        )
