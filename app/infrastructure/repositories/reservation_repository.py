"""Persistence helpers for visit reservations."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, time

from app.domain.entities import Reservation
from app.domain.entities.reservation import (
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_PENDING,
)
from app.infrastructure.models import ListingModel, ReservationModel
from app.utils import ensure_app_timezone

from .base import SessionRepository

OPEN_RESERVATION_STATUSES = (RESERVATION_STATUS_PENDING, RESERVATION_STATUS_CONFIRMED)


class ReservationRepository(SessionRepository):
    """Provide CRUD and slot queries for :class:`Reservation` objects."""

    def get(self, reservation_id: int) -> Reservation | None:
        model = self.session.get(ReservationModel, reservation_id)
        return self._to_entity(model) if model else None

    def create(self, reservation: Reservation) -> Reservation:
        model = ReservationModel(
            user_id=reservation.user_id,
            listing_id=reservation.listing_id,
            visit_date=reservation.visit_date,
            visit_time=reservation.visit_time,
            party_size=reservation.party_size,
            notes=reservation.notes,
            visitor_phone=reservation.visitor_phone,
            agent_message=reservation.agent_message,
            status=reservation.status,
        )
        self._save(model)
        return self._to_entity(model)

    def update_status(
        self,
        reservation_id: int,
        status: str,
        *,
        agent_message: str | None = None,
    ) -> Reservation:
        model = self.session.get(ReservationModel, reservation_id)
        if model is None:
            msg = f"Reservation with id {reservation_id} not found"
            raise ValueError(msg)
        model.status = status
        if agent_message is not None:
            model.agent_message = agent_message
        self._save(model)
        return self._to_entity(model)

    def is_slot_confirmed(
        self,
        listing_id: int,
        visit_date: date,
        visit_time: time,
        *,
        exclude_id: int | None = None,
    ) -> bool:
        query = self.session.query(ReservationModel.id).filter(
            ReservationModel.listing_id == listing_id,
            ReservationModel.visit_date == visit_date,
            ReservationModel.visit_time == visit_time,
            ReservationModel.status == RESERVATION_STATUS_CONFIRMED,
        )
        if exclude_id is not None:
            query = query.filter(ReservationModel.id != exclude_id)
        return query.first() is not None

    def has_open_reservations(self, listing_id: int, *, exclude_id: int | None = None) -> bool:
        """Whether a pending or confirmed visit still holds ``listing_id``."""

        query = self.session.query(ReservationModel.id).filter(
            ReservationModel.listing_id == listing_id,
            ReservationModel.status.in_(OPEN_RESERVATION_STATUSES),
        )
        if exclude_id is not None:
            query = query.filter(ReservationModel.id != exclude_id)
        return query.first() is not None

    def confirmed_times(self, listing_id: int, visit_date: date) -> set[time]:
        query = self.session.query(ReservationModel.visit_time).filter(
            ReservationModel.listing_id == listing_id,
            ReservationModel.visit_date == visit_date,
            ReservationModel.status == RESERVATION_STATUS_CONFIRMED,
        )
        return {visit_time for (visit_time,) in query.all()}

    def list_for_user(self, user_id: int) -> Sequence[Reservation]:
        query = self._ordered(
            self.session.query(ReservationModel).filter(ReservationModel.user_id == user_id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_listing(self, listing_id: int) -> Sequence[Reservation]:
        query = self._ordered(
            self.session.query(ReservationModel).filter(
                ReservationModel.listing_id == listing_id
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_owner(self, owner_id: int) -> Sequence[Reservation]:
        query = self._ordered(
            self.session.query(ReservationModel)
            .join(ListingModel, ReservationModel.listing_id == ListingModel.id)
            .filter(ListingModel.owner_id == owner_id)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _ordered(query):
        return query.order_by(
            ReservationModel.visit_date.desc(),
            ReservationModel.visit_time.desc(),
            ReservationModel.id.desc(),
        )

    @staticmethod
    def _to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            id=model.id,
            user_id=model.user_id,
            listing_id=model.listing_id,
            visit_date=model.visit_date,
            visit_time=model.visit_time,
            party_size=model.party_size,
            notes=model.notes,
            visitor_phone=model.visitor_phone,
            agent_message=model.agent_message,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ReservationRepository"]
