class DigitrigError(Exception):
    """Base error."""

class TableConfigError(DigitrigError, ValueError):
    """Raised when a lookup table is requested with an unusable size."""

class UnknownUnitError(DigitrigError, ValueError):
    """Raised when an angle unit name is not recognised."""

class UnknownTierError(DigitrigError, ValueError):
    """Raised when a precision tier name is not one of table, smooth or smoother."""

class UnknownInterpolatorError(DigitrigError, KeyError):
    """Raised when no Interpolator is registered under a tag."""

class DependencyUnavailableError(DigitrigError, RuntimeError):
    """Raised when an optional extra (numpy, scipy, matplotlib) is not installed."""
