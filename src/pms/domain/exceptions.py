"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidPricingInput(ValidationError):
    """Desired margin plus tax rate leaves no room for a price."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ArithmeticInconsistency(DomainException):
    """A figure would have been derived from an impossible aggregate."""
