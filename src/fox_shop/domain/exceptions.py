"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
status code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Required input is missing or a value breaks an invariant."""


class EntityNotFoundError(DomainException):
    """No entity matches the given identifier."""


class ConflictError(DomainException):
    """The operation would overwrite an existing entity."""
