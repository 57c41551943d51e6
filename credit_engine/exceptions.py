"""Exceptions raised by the credit engine."""


class CreditEngineError(Exception):
    """Base exception for the credit engine."""

    pass


class InvalidArgumentError(CreditEngineError, ValueError):
    """A scoring input is outside its allowed domain (negative count, under-age, ...)."""

    pass


class PointTableError(CreditEngineError):
    """A boundary table and its paired point table are inconsistent."""

    pass
