"""
Domain errors raised by the scoring services

Routers translate these into HTTP responses:
- NotFound -> 404
- InvalidState -> 400
- StoreFailure -> 500 (opaque to the caller, logged server-side)
"""


class ScoringError(Exception):
    """Base class for grading and aggregation failures"""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ScoringError):
    """A referenced section or lesson does not exist"""


class InvalidState(ScoringError):
    """The entity exists but lacks the data needed to proceed"""


class StoreFailure(ScoringError):
    """The persistence layer failed (connectivity, constraint violation, ...)"""
