"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The cart and wishlist services translate them into result outcomes instead.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The storage backend could not complete a read, write or delete."""


class AuthorizationError(DomainException):
    """The caller is not signed in or lacks the required role."""


class PermissionCheckError(DomainException):
    """The store credentials cannot read, write or delete documents."""
