"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import Message
from app.infrastructure.models import MessageModel
from app.utils import ensure_app_timezone

from .base import SessionRepository


class MessageRepository(SessionRepository):
    """Store and list :class:`Message` objects."""

    def get(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        return self._to_entity(model) if model else None

    def create(self, message: Message) -> Message:
        model = MessageModel(
            sender_id=message.sender_id,
            recipient_id=message.recipient_id,
            listing_id=message.listing_id,
            subject=message.subject,
            content=message.content,
            message_type=message.message_type,
            is_read=message.is_read,
        )
        self._save(model)
        return self._to_entity(model)

    def list_received(self, user_id: int, *, unread_only: bool = False) -> Sequence[Message]:
        query = self.session.query(MessageModel).filter(MessageModel.recipient_id == user_id)
        if unread_only:
            query = query.filter(MessageModel.is_read.is_(False))
        query = query.order_by(MessageModel.sent_at.desc(), MessageModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def list_sent(self, user_id: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.sender_id == user_id)
            .order_by(MessageModel.sent_at.desc(), MessageModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def mark_as_read(self, message_id: int) -> Message:
        model = self.session.get(MessageModel, message_id)
        if model is None:
            msg = f"Message with id {message_id} not found"
            raise ValueError(msg)
        model.is_read = True
        self._save(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            recipient_id=model.recipient_id,
            listing_id=model.listing_id,
            subject=model.subject,
            content=model.content,
            message_type=model.message_type,
            is_read=model.is_read,
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["MessageRepository"]
