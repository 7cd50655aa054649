"""Exceptions raised by use cases and translated by the HTTP layer."""


class DomainError(ValueError):
    """Base class for user-facing business rule violations."""


class ValidationError(DomainError):
    """The request is malformed or violates an invariant."""


class NotFoundError(DomainError):
    """A referenced record does not exist."""


class ConflictError(DomainError):
    """The request conflicts with the current state of a record."""


__all__ = ["DomainError", "ValidationError", "NotFoundError", "ConflictError"]
