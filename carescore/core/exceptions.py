"""Errors raised by the scoring engine.

All of these signal bad input from the caller. None are transient, so
callers should surface them rather than retry.
"""


class CareScoreError(Exception):
    """Base class for engine errors."""

    pass


class NotFoundError(CareScoreError):
    """Raised when a requested definition does not exist."""

    pass


class InstrumentNotFoundError(NotFoundError):
    """Raised when an instrument key is not in the catalog."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"Unknown instrument: {key}")


class ValidationError(CareScoreError):
    """Raised when input data fails validation.

    `field` names the offending question id or entry field when known.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class CatalogError(CareScoreError):
    """Raised when an instrument definition is internally inconsistent."""

    pass
