"""Custom exceptions for Quick Command Buttons."""


class QuickCommandsError(Exception):
    """Base class for import/export failures."""

    pass


class NotFoundError(QuickCommandsError):
    """Raised when a requested resource is not found."""

    pass


class ValidationError(QuickCommandsError):
    """Raised when an import file fails validation."""

    pass


class BackupError(QuickCommandsError):
    """Raised when a backup could not be written."""

    pass


class PreviewExpiredError(QuickCommandsError):
    """Raised when an import preview is older than the expiry window."""

    pass


class ScopeMismatchError(QuickCommandsError):
    """Raised when a preview is confirmed against a different scope."""

    pass
