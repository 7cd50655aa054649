"""Persistence helpers for payments."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import Payment
from app.infrastructure.models import PaymentModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

from .base import SessionRepository, to_float


class PaymentRepository(SessionRepository):
    """Provide CRUD operations for :class:`Payment` objects."""

    def get(self, payment_id: int) -> Payment | None:
        model = self.session.get(PaymentModel, payment_id)
        return self._to_entity(model) if model else None

    def get_by_reference(self, reference: str) -> Payment | None:
        model = (
            self.session.query(PaymentModel)
            .filter(PaymentModel.reference == reference)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> Sequence[Payment]:
        query = (
            self.session.query(PaymentModel)
            .filter(PaymentModel.user_id == user_id)
            .order_by(PaymentModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, payment: Payment) -> Payment:
        model = PaymentModel()
        self._apply_entity_to_model(model, payment)
        self._save(model)
        return self._to_entity(model)

    def update(self, payment: Payment) -> Payment:
        model = self.session.get(PaymentModel, payment.id)
        if model is None:
            msg = f"Payment with id {payment.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, payment)
        self._save(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: PaymentModel, payment: Payment) -> None:
        model.user_id = payment.user_id
        model.reservation_id = payment.reservation_id
        model.amount = payment.amount
        model.method = payment.method
        model.status = payment.status
        model.reference = payment.reference
        model.payment_type = payment.payment_type
        model.description = payment.description
        model.paid_at = ensure_app_naive_datetime(payment.paid_at)

    @staticmethod
    def _to_entity(model: PaymentModel) -> Payment:
        return Payment(
            id=model.id,
            user_id=model.user_id,
            reservation_id=model.reservation_id,
            amount=to_float(model.amount) or 0.0,
            method=model.method,
            status=model.status,
            reference=model.reference,
            payment_type=model.payment_type,
            description=model.description,
            paid_at=ensure_app_timezone(model.paid_at),
        )


__all__ = ["PaymentRepository"]
