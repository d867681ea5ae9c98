"""Domain-level exceptions.

All business rule violations and storage faults are expressed as subclasses
of DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):
    """No product in the catalog has the requested ID."""


class CartCapacityExceeded(ValidationError):
    """The cart already holds its maximum number of distinct products."""


class InvalidPaymentMethod(ValidationError):
    """The payment choice is not one of the supported methods."""


class StoreUnavailableError(DomainException):
    """A durable store could not be read or written."""


class CounterStoreUnavailable(StoreUnavailableError):
    """The order ID counter could not be read or persisted."""


class LogStoreUnavailable(StoreUnavailableError):
    """The order audit log could not be appended to."""


class OrderStoreUnavailable(StoreUnavailableError):
    """The order history could not be read or written."""
