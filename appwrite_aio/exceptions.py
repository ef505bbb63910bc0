"""Exception classes for the appwrite_aio package.

This module defines the exceptions raised throughout the appwrite_aio package
for configuration problems, invalid arguments and failed API calls.
"""
from typing import Any, Optional


class AppwriteError(Exception):
    """Base exception for all Appwrite SDK errors.

    Carries the HTTP status code (500 for transport failures), the error type
    reported by the server and, when available, the decoded response payload.
    Catching this exception will catch all appwrite_aio-specific errors.
    """

    def __init__(self, message: str = "An error occurred", code: int = 0,
                 type: str = "", response: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.type = type or ""
        self.response = response

    def __str__(self) -> str:
        return f"[{self.code}] {self.type}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, type={self.type!r})"


class ConfigurationError(AppwriteError):
    """Raised when a required configuration value is missing.

    Not retryable: the client configuration has to be fixed first.
    """

    default_message = "The Appwrite client is not configured."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message, code=0, type="configuration_error")


class MissingProjectIdError(ConfigurationError):
    """Raised when no project id is configured."""

    default_message = (
        "The project id is required for calls to Appwrite. Set APPWRITE_PROJECT_ID in the "
        "environment or pass it with ClientConfig(project=...) / ClientConfig.set_project(...)."
    )


class MissingSecretError(ConfigurationError):
    """Raised when no API secret is configured and no JWT or session is set."""

    default_message = (
        "The secret is required for calls to Appwrite. Set APPWRITE_SECRET in the environment "
        "or pass it with ClientConfig(key=...) / ClientConfig.set_key(...)."
    )


class MissingRootUriError(ConfigurationError):
    """Raised when no API endpoint is configured."""

    default_message = (
        "The root URI is required to specify the Appwrite environment you are calling, "
        "e.g. https://cloud.appwrite.io/v1. Set APPWRITE_ROOT_URI in the environment or pass "
        "it with ClientConfig(endpoint=...) / ClientConfig.set_endpoint(...)."
    )


class ValidationError(AppwriteError, ValueError):
    """Raised when call arguments are invalid.

    This is always raised before any network request is made:
    - A required parameter is missing
    - A payload cannot be flattened into query/form fields
    - An endpoint is not an absolute http(s) URL
    """

    def __init__(self, message: str, response: Optional[Any] = None):
        super().__init__(message, code=400, type="validation_error", response=response)


class InvalidValueError(ValidationError):
    """Raised by the strict constant validators for unknown tokens."""
