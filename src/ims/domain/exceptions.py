"""Domain-level exceptions.

Every invariant violation in the core is an InvalidArgumentError.  There is
no "not found" error at this layer: lookups by unknown id return None.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """An operation was called with an argument that breaks an invariant."""
