"""Errors raised while loading audit data."""


class AuditLoadError(Exception):
    """The audit load failed as a whole and no live dataset is available."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class ManifestError(AuditLoadError):
    """The manifest is unreachable or malformed."""


class AuditFileError(AuditLoadError):
    """A single audit file is unreachable or malformed."""
