"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
The pricing engine itself never raises; these belong to checkout.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationRequiredError(DomainException):
    """Checkout was attempted without a signed-in customer."""


class PaymentError(DomainException):
    """The payment gateway declined or failed to process a charge."""
