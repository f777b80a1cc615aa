"""
Custom exceptions for the Currency Converter menu system.
"""

class ConverterError(Exception):
    """Base exception for all Currency Converter menu related errors."""
    pass

class UnknownCurrencyError(ConverterError):
    """Raised when a currency code is not present in the rate table."""
    pass

class ConfigurationError(ConverterError):
    """Raised when there's a configuration error."""
    pass
