"""Errors raised by swegeodesy"""

__all__ = ['DomainOutOfRangeError', 'UnknownProjectionError']


class UnknownProjectionError(ValueError):
    """Raised when a projection identifier is not present in the parameter table"""

    def __init__(self, projection):
        self.projection = projection
        super().__init__(f"Unknown projection '{projection}'")


class DomainOutOfRangeError(ValueError):
    """
    Raised in strict mode when a coordinate lies outside the extent the
    Swedish grids are accurate for. In non-strict mode the same condition
    is only logged.
    """
