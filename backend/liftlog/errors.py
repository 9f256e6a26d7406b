# liftlog/errors.py
"""
Error taxonomy shared by the repositories, the facade and the HTTP layer.

Each error carries a stable ``code`` so callers can tell the four kinds apart
without matching on messages.
"""


class LiftlogError(Exception):
    """Base class for every error raised by the persistence core."""

    code = "liftlog_error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(LiftlogError):
    """Malformed input, rejected before any storage mutation."""

    code = "validation_error"

    @classmethod
    def from_errors(cls, errors) -> "ValidationError":
        """Build from pydantic-style error dicts, reporting the first one."""
        if not errors:
            return cls("invalid input")
        first = errors[0]
        where = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", "invalid input")
        return cls(f"{where}: {msg}" if where else msg)


class NotFoundError(LiftlogError):
    """The targeted id has no matching row."""

    code = "not_found"


class IntegrityError(LiftlogError):
    """A write would break a foreign-key (or check) constraint; nothing was persisted."""

    code = "integrity_error"


class StorageUnavailableError(LiftlogError):
    """The backing store cannot be opened or written."""

    code = "storage_unavailable"
