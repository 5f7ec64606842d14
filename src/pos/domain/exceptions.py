"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidProduct(ValidationError):
    """A product registration was rejected (bad name, price or duplicate)."""


class DuplicateCoupon(ValidationError):
    """A coupon with the same name is already registered."""


class InvalidQuantity(ValidationError):
    """A line item count would leave the 0..99 range."""


class ConfigurationError(ValidationError):
    """A promotion, coupon or catalog description is malformed."""


class NotFound(EntityNotFoundError):
    """An unknown product or coupon name was requested."""
