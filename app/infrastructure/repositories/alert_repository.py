"""Persistence helpers for alerts and their notification history."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func

from app.domain.entities import (
    Alert,
    AlertCriteria,
    AlertHistoryEntry,
    AlertStatistics,
    Notification,
)
from app.infrastructure.models import (
    AlertHistoryModel,
    AlertModel,
    NotificationModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

from .base import SessionRepository, to_float


class AlertRepository(SessionRepository):
    """Provide CRUD operations and sweep queries for :class:`Alert` objects."""

    def get(self, alert_id: int) -> Alert | None:
        model = self.session.get(AlertModel, alert_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int, *, active_only: bool = False) -> Sequence[Alert]:
        query = self.session.query(AlertModel).filter(AlertModel.user_id == user_id)
        if active_only:
            query = query.filter(AlertModel.is_active.is_(True))
        query = query.order_by(AlertModel.created_at.desc(), AlertModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def list_sweepable_alerts(self) -> Sequence[tuple[Alert, str]]:
        """Active alerts of active owners paired with the owner push token."""

        query = (
            self.session.query(AlertModel, UserModel.push_token)
            .join(UserModel, AlertModel.user_id == UserModel.id)
            .filter(AlertModel.is_active.is_(True))
            .filter(UserModel.is_active.is_(True))
            .filter(UserModel.push_token.isnot(None))
            .filter(UserModel.push_token != "")
            .order_by(AlertModel.id.asc())
        )
        return [(self._to_entity(model), push_token) for model, push_token in query.all()]

    def create(self, alert: Alert) -> Alert:
        model = AlertModel()
        self._apply_entity_to_model(model, alert)
        if alert.created_at is not None:
            model.created_at = ensure_app_naive_datetime(alert.created_at)
        self._save(model)
        return self._to_entity(model)

    def update(self, alert: Alert) -> Alert:
        model = self._require_model(alert.id)
        self._apply_entity_to_model(model, alert)
        self._save(model)
        return self._to_entity(model)

    def delete(self, alert_id: int) -> None:
        model = self._require_model(alert_id)
        self.session.delete(model)
        self._finish()

    def record_notification(
        self,
        alert_id: int,
        *,
        listing_ids: Sequence[int],
        notified_at: datetime,
        inbox: Notification | None = None,
    ) -> AlertHistoryEntry:
        """Append a history entry and bump the alert counters together.

        The optional ``inbox`` notification is written in the same unit of
        work so the three effects are visible together or not at all.
        """

        alert_model = self._require_model(alert_id)
        naive_now = ensure_app_naive_datetime(notified_at)
        history = AlertHistoryModel(
            alert_id=alert_id,
            match_count=len(listing_ids),
            listing_ids=[int(listing_id) for listing_id in listing_ids],
            notified_at=naive_now,
        )
        self.session.add(history)
        self.session.query(AlertModel).filter(AlertModel.id == alert_id).update(
            {
                AlertModel.notification_count: AlertModel.notification_count + 1,
                AlertModel.last_notified_at: naive_now,
                AlertModel.last_match_count: len(listing_ids),
            },
            synchronize_session=False,
        )
        if inbox is not None:
            self.session.add(
                NotificationModel(
                    user_id=inbox.user_id,
                    event_type=inbox.event_type,
                    title=inbox.title,
                    message=inbox.message,
                    payload=inbox.payload or {},
                    created_at=naive_now,
                )
            )
        try:
            self._finish()
        except Exception:
            if self.autocommit:
                self.session.rollback()
            raise
        self.session.expire(alert_model)
        return self._history_to_entity(history)

    def list_history(self, alert_id: int, *, limit: int = 10) -> Sequence[AlertHistoryEntry]:
        query = (
            self.session.query(AlertHistoryModel)
            .filter(AlertHistoryModel.alert_id == alert_id)
            .order_by(AlertHistoryModel.notified_at.desc(), AlertHistoryModel.id.desc())
            .limit(limit)
        )
        return [self._history_to_entity(model) for model in query.all()]

    def statistics(self, alert_id: int) -> AlertStatistics:
        total, average, maximum, minimum, last = (
            self.session.query(
                func.count(AlertHistoryModel.id),
                func.avg(AlertHistoryModel.match_count),
                func.max(AlertHistoryModel.match_count),
                func.min(AlertHistoryModel.match_count),
                func.max(AlertHistoryModel.notified_at),
            )
            .filter(AlertHistoryModel.alert_id == alert_id)
            .one()
        )
        return AlertStatistics(
            total_notifications=int(total or 0),
            average_matches=round(float(average or 0), 2),
            max_matches=int(maximum or 0),
            min_matches=int(minimum or 0),
            last_notified_at=ensure_app_timezone(last),
        )

    def _require_model(self, alert_id: int | None) -> AlertModel:
        model = self.session.get(AlertModel, alert_id) if alert_id else None
        if model is None:
            msg = f"Alert with id {alert_id} not found"
            raise ValueError(msg)
        return model

    @staticmethod
    def _apply_entity_to_model(model: AlertModel, alert: Alert) -> None:
        criteria = alert.criteria
        model.user_id = alert.user_id
        model.name = alert.name
        model.property_type = criteria.property_type
        model.transaction_type = criteria.transaction_type
        model.city = criteria.city
        model.district = criteria.district
        model.price_min = criteria.price_min
        model.price_max = criteria.price_max
        model.surface_min = criteria.surface_min
        model.surface_max = criteria.surface_max
        model.min_bedrooms = criteria.min_bedrooms
        model.min_bathrooms = criteria.min_bathrooms
        model.amenities = list(criteria.amenities or [])
        model.is_active = alert.is_active
        model.frequency = alert.frequency
        model.notifications_enabled = alert.notifications_enabled
        model.last_notified_at = ensure_app_naive_datetime(alert.last_notified_at)
        model.notification_count = alert.notification_count
        model.last_match_count = alert.last_match_count

    @staticmethod
    def _history_to_entity(model: AlertHistoryModel) -> AlertHistoryEntry:
        return AlertHistoryEntry(
            id=model.id,
            alert_id=model.alert_id,
            match_count=model.match_count,
            listing_ids=list(model.listing_ids or []),
            notified_at=ensure_app_timezone(model.notified_at),
            status=model.status,
        )

    @staticmethod
    def _to_entity(model: AlertModel) -> Alert:
        return Alert(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            criteria=AlertCriteria(
                property_type=model.property_type,
                transaction_type=model.transaction_type,
                city=model.city,
                district=model.district,
                price_min=to_float(model.price_min),
                price_max=to_float(model.price_max),
                surface_min=to_float(model.surface_min),
                surface_max=to_float(model.surface_max),
                min_bedrooms=model.min_bedrooms,
                min_bathrooms=model.min_bathrooms,
                amenities=list(model.amenities or []),
            ),
            is_active=model.is_active,
            frequency=model.frequency,
            notifications_enabled=model.notifications_enabled,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            last_notified_at=ensure_app_timezone(model.last_notified_at),
            notification_count=model.notification_count or 0,
            last_match_count=model.last_match_count or 0,
        )


__all__ = ["AlertRepository"]
