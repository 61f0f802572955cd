class AmlichError(Exception):
    """Base error."""

class LunarRangeError(AmlichError, ValueError):
    """Raised when a date falls outside the lunar New Year table."""
