class SymbolicationError(Exception):
    """Base exception for all symbolication errors."""


class MissingFieldError(SymbolicationError):
    """Raised when a mandatory crash report header field is absent."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
