"""Exceptions for dynamic pricing."""


class PricingError(Exception):
    """Base class for pricing errors."""
    pass


class PricingConfigurationMissing(PricingError, LookupError):
    """Raised when a room type has no pricing for the requested board type."""
    pass
