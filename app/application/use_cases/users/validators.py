"""Common validation helpers for user use cases."""

import re

from app.application.errors import ValidationError
from app.domain.entities.user import USER_ROLES

_PHONE_PATTERN = re.compile(r"^\+?\d{8,15}$")
MIN_PASSWORD_LENGTH = 6


def normalize_telephone(telephone: str) -> str:
    """Return the phone number without spaces, dots or dashes."""

    normalized = re.sub(r"[\s.\-()]", "", telephone or "")
    if not _PHONE_PATTERN.match(normalized):
        raise ValidationError("Le numéro de téléphone est invalide")
    return normalized


def ensure_valid_password(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères"
        )
    return password


def ensure_valid_role(role: str) -> str:
    normalized = (role or "").strip().lower()
    if normalized not in USER_ROLES:
        raise ValidationError(f"Rôle inconnu: {role}")
    return normalized


__all__ = ["ensure_valid_password", "ensure_valid_role", "normalize_telephone"]
