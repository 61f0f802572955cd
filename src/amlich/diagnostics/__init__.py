"""Diagnostics package.

Plain-text tools that print tables derived from the engine; nothing here is
needed for conversion itself.
"""

__all__ = ["pretty_month", "new_years_table", "leap_months"]
