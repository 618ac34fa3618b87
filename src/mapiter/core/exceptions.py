"""Exception hierarchy for the mapiter helpers."""

__all__ = ["MapiterError", "EmptyReductionError"]


class MapiterError(Exception):
    """Base class for errors raised by mapiter."""


class EmptyReductionError(MapiterError, TypeError):
    """Raised when reducing an empty mapping without an initial value."""

    def __init__(self, message: str = "reduce() of empty mapping with no initial value"):
        super().__init__(message)
