"""Error types raised by the blobnav core.

Resolution errors are raised before any request is made. Listing errors are
raised by fetch adapters and reported by the navigator.
"""

_INVALID_URL_MESSAGE = (
    "Invalid Azure Blob Storage URL format. "
    "Expected: https://account.blob.core.windows.net/container"
)


class ResolutionError(ValueError):
    """Raised when a URL cannot be resolved to a blob container."""

    default_message = _INVALID_URL_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MalformedUrl(ResolutionError):
    """The input is empty or is not an http(s) URL."""


class NotABlobEndpoint(ResolutionError):
    """The host is not a storage account blob endpoint."""


class MissingContainer(ResolutionError):
    """The URL path names no container."""


class ListingError(RuntimeError):
    """Raised when a container listing cannot be fetched."""

    default_message = "Failed to fetch container contents"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFound(ListingError):
    """The container does not exist or does not allow anonymous listing."""

    default_message = "Container not found or not publicly accessible"


class Forbidden(ListingError):
    """The service refused anonymous access to the container."""

    default_message = "Access denied. Container must be publicly accessible"


class TransportFailure(ListingError):
    """Any other failure while talking to the service."""

    def __init__(self, status: str | None = None):
        message = (
            f"{self.default_message}: {status}" if status else self.default_message
        )
        super().__init__(message)
        self.status = status
