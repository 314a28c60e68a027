"""Error taxonomy shared by every Watson service client."""


class WatsonError(Exception):
    """Base error for Watson operations, with a machine-readable code."""

    code = "watson_error"

    def __init__(self, message: str | None = None, *, status: int | None = None) -> None:
        """Initialize with an optional human-readable message and HTTP status.

        Args:
            message: Human-readable error description, if one is known.
            status: HTTP status code of the response that produced the error.

        """
        super().__init__(message or self.code)
        self.message = message
        self.status = status


class EncodingError(WatsonError):
    """A path component could not be percent-encoded. Raised before any network I/O."""

    code = "encoding_error"


class SerializationError(WatsonError):
    """A request body could not be converted to JSON. Raised before any network I/O."""

    code = "serialization_error"


class TransportError(WatsonError):
    """Non-2xx status without a structured error body, or a failed HTTP exchange."""

    code = "transport_error"

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.status is None:
            return "HTTP request failed."
        return f"HTTP {self.status}"


class ServiceError(WatsonError):
    """Non-2xx status with a JSON error envelope carrying a message."""

    code = "service_error"

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status})"


class DecodingError(WatsonError):
    """Successful status, but the body does not match the declared result shape."""

    code = "decoding_error"
