"""PySnowMelt error types.

Example:
    try:
        site = SiteConfig(forest_fraction=1.5)
    except DomainError as e:
        print(f"Bad input '{e.name}': {e}")
"""

from __future__ import annotations


class PySnowMeltError(Exception):
    """Base class for all PySnowMelt errors."""

    pass


class DomainError(PySnowMeltError, ValueError):
    """Raised when an input lies outside its physically valid range.

    Attributes:
        name: Name of the offending parameter (e.g., "forest_fraction").
        value: The rejected value.
    """

    def __init__(self, message: str, name: str | None = None, value: float | None = None):
        self.name = name
        self.value = value
        super().__init__(message)


class SeriesLengthError(PySnowMeltError, ValueError):
    """Raised when output series handed to the tabular writer differ in length.

    Attributes:
        lengths: Mapping of series name to its length.
    """

    def __init__(self, lengths: dict[str, int]):
        self.lengths = lengths
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        super().__init__(f"Output series must share one length, got: {detail}")
