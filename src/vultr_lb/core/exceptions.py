"""Custom exceptions for vultr_lb.

Every failure raised by the client derives from :class:`VultrError` so callers
can catch the whole family at once, or branch on the concrete class.
"""

from typing import Any, Dict, Optional


class VultrError(Exception):
    """Base exception for all vultr_lb errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class VultrAPIKeyError(VultrError):
    """Raised when no Vultr API key can be found.

    The default message explains where the key is looked up.
    """

    def __init__(self, message: str | None = None):
        if message is None:
            message = self._default_message()
        super().__init__(message)

    @staticmethod
    def _default_message() -> str:
        return """VULTR_API_KEY environment variable is required but not set.

Get your API key:
  https://my.vultr.com/settings/#settingsapi

Set your API key using one of these methods:

  1. Environment variable:
     export VULTR_API_KEY=your_api_key_here

  2. In your project's .env file:
     echo "VULTR_API_KEY=your_api_key_here" >> .env

  3. In a credentials file (~/.config/vultr/credentials.toml):
     api_key = "your_api_key_here\""""


class RequestBuildError(VultrError):
    """Raised when a request path, query string or body cannot be constructed."""

    pass


class TransportError(VultrError):
    """Raised when the request never produced an HTTP response."""

    def __init__(
        self, method: str, url: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed: {message}", details)


class DecodeError(VultrError):
    """Raised when a successful response body has an unexpected shape."""

    pass


class RemoteError(VultrError):
    """Raised when the API answers with a non-success status.

    ``message`` is the server's error text, unmodified.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}", details)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @staticmethod
    def from_status(
        status_code: int, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "RemoteError":
        """Build the RemoteError subclass matching ``status_code``."""
        if status_code == 404:
            cls = NotFoundError
        elif status_code in (401, 403):
            cls = UnauthorizedError
        elif status_code in (400, 422):
            cls = ValidationError
        elif status_code >= 500:
            cls = ServerError
        else:
            cls = RemoteError
        return cls(status_code, message, details)


class NotFoundError(RemoteError):
    """The addressed resource does not exist remotely."""

    pass


class UnauthorizedError(RemoteError):
    """The API key was rejected or lacks permission."""

    pass


class ValidationError(RemoteError):
    """The server rejected the request payload."""

    pass


class ServerError(RemoteError):
    """The server failed to process an otherwise valid request."""

    pass
