"""Typed errors raised by mutations and external collaborators."""


class PatrimonyError(Exception):
    """Base exception for patrimony errors."""


class ValidationError(PatrimonyError):
    """A mutation received malformed input or a duplicate id."""


class NotFoundError(PatrimonyError):
    """An operation referenced an unknown account id."""


class StorageError(PatrimonyError):
    """The snapshot store could not read or write the document."""


class UploadError(PatrimonyError):
    """An asset upload failed."""


__all__ = [
    "PatrimonyError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "UploadError",
]
