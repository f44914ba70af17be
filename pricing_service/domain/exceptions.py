"""Domain exceptions for the pricing service."""


class PricingError(Exception):
    """Base class for pricing service errors."""


class PersistenceError(PricingError):
    """Raised when the price store fails."""
