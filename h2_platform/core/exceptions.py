"""Custom exception hierarchy for the hydrogen platform calculation library."""


class H2PlatformError(Exception):
    """Base exception for all h2_platform errors."""
    pass


class CalculationError(H2PlatformError):
    """Base exception for calculation failures."""
    pass


class InvalidInputError(CalculationError):
    """Raised when a calculation input is outside its valid range."""
    pass


class DegenerateInputError(CalculationError):
    """Raised when an input would make a derived quantity divide by zero."""
    pass


class ConfigurationError(H2PlatformError):
    """Raised for scenario configuration loading/validation errors."""
    pass
