"""Domain exceptions for modelcdn.

Defines domain-level exceptions for rejected uploads, unsafe names, missing
files and failed authorization. These exceptions are independent of HTTP;
the presentation layer maps error_code to a status in exception handlers.
"""

from typing import Any


class ModelCdnException(Exception):
    """Base exception for all modelcdn errors.

    All custom exceptions inherit from this class so that handlers can
    render a consistent JSON body from message, error_code and details.

    Attributes:
        message: Human-readable error description (rendered as ``error``).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, filename).
        headers: Optional response headers (e.g. WWW-Authenticate).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
            headers: Optional headers to attach to the HTTP response.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body for this exception."""
        body: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.details:
            body["details"] = self.details
        return body


class MissingInputException(ModelCdnException):
    """Raised when a required input (file, URL, password) is absent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of what is missing (e.g. 'No file provided').
            field: Optional request field that was missing.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "MISSING_INPUT", details)


class InvalidInputException(ModelCdnException):
    """Raised when an input is present but malformed (bad URL, bad media type)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID_INPUT", details)


class InvalidPathException(ModelCdnException):
    """Raised when a filename contains a path separator or parent reference."""

    def __init__(self, filename: str, message: str = "Invalid file path") -> None:
        """Initialize with the rejected name.

        Args:
            filename: The caller-supplied name that failed the traversal check.
            message: Human-readable message.
        """
        super().__init__(message, "INVALID_PATH", {"filename": filename})


class UnsupportedTypeException(ModelCdnException):
    """Raised when a file's extension or declared type is not accepted."""

    def __init__(self, message: str, allowed: list[str] | None = None) -> None:
        """Initialize with message and the accepted set.

        Args:
            message: Message enumerating what is accepted.
            allowed: Accepted extensions or type names.
        """
        details = {"allowed": allowed} if allowed else {}
        super().__init__(message, "UNSUPPORTED_TYPE", details)


class PayloadTooLargeException(ModelCdnException):
    """Raised when a payload exceeds the ceiling for its media type."""

    def __init__(self, media_type: str, size: int, max_bytes: int) -> None:
        """Initialize with type, actual size and the ceiling.

        Args:
            media_type: Logical type whose ceiling applies (e.g. 'image').
            size: Payload size in bytes.
            max_bytes: Ceiling in bytes.
        """
        limit_mb = max_bytes // (1024 * 1024)
        super().__init__(
            f"File size exceeds {limit_mb}MB limit for {media_type}",
            "PAYLOAD_TOO_LARGE",
            {"media_type": media_type, "size": size, "max_bytes": max_bytes},
        )


class UnauthorizedException(ModelCdnException):
    """Raised when an API key or admin credential is missing or wrong."""

    def __init__(
        self,
        message: str = "Unauthorized - Invalid or missing API key",
        realm: str | None = None,
    ) -> None:
        """Initialize with message and optional Bearer realm.

        Args:
            message: Human-readable message.
            realm: When set, responses carry WWW-Authenticate: Bearer realm="...".
        """
        headers = {"WWW-Authenticate": f'Bearer realm="{realm}"'} if realm else None
        super().__init__(message, "UNAUTHORIZED", headers=headers)


class NotFoundException(ModelCdnException):
    """Raised when a named file is absent from every candidate root."""

    def __init__(self, resource: str, filename: str) -> None:
        """Initialize with resource label and the missing name.

        Args:
            resource: Label used in the message (e.g. 'Model', 'File').
            filename: The name that was not found.
        """
        super().__init__(
            f"{resource} not found",
            "NOT_FOUND",
            {"filename": filename},
        )


class AdminNotConfiguredException(ModelCdnException):
    """Raised when admin login is attempted but no admin password is configured."""

    def __init__(self) -> None:
        super().__init__(
            "Admin authentication not configured. Set ADMIN_PASSWORD environment variable.",
            "ADMIN_NOT_CONFIGURED",
        )
