"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.application.errors import ConflictError, DomainError, NotFoundError

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


def http_error(exc: DomainError) -> HTTPException:
    """Translate a domain error into the matching :class:`HTTPException`."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


__all__ = ["http_error"]
