"""Domain errors raised by services and repositories.

Every error carries a human readable `message` and the HTTP status the
API reports for it. The exception handlers in `main.py` render all of
them as `{"message": ...}`.
"""


class WordlyError(Exception):
    """Base class for errors surfaced to API callers."""
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WordlyError):
    """Required input is missing or malformed."""
    http_status = 400


class NotFoundError(WordlyError):
    """A lookup completed but matched nothing."""
    http_status = 404


class StoreError(WordlyError):
    """The persistent store failed (connectivity, constraint, driver)."""
    http_status = 500
