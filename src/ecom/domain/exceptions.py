"""Domain-level exceptions.

Every failure the catalog can report derives from DomainException so the
API and CLI layers can translate them in one place.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field value or business rule was rejected."""


class EntityNotFoundError(DomainException):
    """A requested record does not exist (or belongs to another store)."""


class IntegrityError(DomainException):
    """A write would break a foreign-key relation between records."""
