"""Use cases for the public profile of a user."""

from sqlalchemy.orm import Session

from app.application.errors import ConflictError, NotFoundError
from app.domain.entities import Profile
from app.infrastructure.repositories import ProfileRepository, UserRepository


def get_profile(session: Session, *, user_id: int) -> Profile:
    profile = ProfileRepository(session).get_by_user(user_id)
    if profile is None:
        raise NotFoundError("Profil non trouvé")
    return profile


def save_profile(
    session: Session,
    *,
    user_id: int,
    email: str | None = None,
    address: str | None = None,
    city: str | None = None,
    country: str | None = None,
    bio: str | None = None,
    avatar: str | None = None,
) -> Profile:
    if not UserRepository(session).exists(user_id):
        raise NotFoundError("Utilisateur non trouvé")
    repository = ProfileRepository(session)
    normalized_email = (email or "").strip().lower() or None
    if normalized_email and repository.email_taken(normalized_email, exclude_user_id=user_id):
        raise ConflictError("Cet email est déjà utilisé")

    return repository.upsert(
        Profile(
            id=None,
            user_id=user_id,
            email=normalized_email,
            address=address,
            city=city,
            country=country or "CI",
            bio=bio,
            avatar=avatar,
            updated_at=None,
        )
    )


__all__ = ["get_profile", "save_profile"]
