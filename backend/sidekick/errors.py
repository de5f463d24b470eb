"""Error taxonomy for upload, lookup and remote answering."""


class SidekickError(Exception):
    """Base class for request-scoped errors reported to the caller."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SidekickError):
    """Missing or invalid request fields."""

    status_code = 400


class UnsupportedMediaTypeError(ValidationError):
    """Uploaded file is neither text/plain nor application/pdf."""


class UploadTooLargeError(SidekickError):
    """Uploaded file exceeds the configured size limit."""

    status_code = 413


class NotFoundError(SidekickError):
    """Unknown document id."""

    status_code = 404


class ExtractionError(SidekickError):
    """Text could not be extracted from an uploaded PDF."""

    status_code = 422


class RemoteUnavailable(Exception):
    """The remote model could not produce an answer.

    Never surfaced to the end user: callers recover by building a local
    fallback answer.
    """


class TransportError(RemoteUnavailable):
    """No credential is configured for the remote endpoint."""


class RemoteAPIError(RemoteUnavailable):
    """Remote endpoint returned a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Remote API returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class NetworkError(RemoteUnavailable):
    """Remote endpoint could not be reached or timed out."""
