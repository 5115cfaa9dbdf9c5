from typing import Any, Dict, List, Optional

# --- Custom Exceptions ---


class MailchimpError(Exception):
    """Base exception class for every error raised by this client."""


class APIError(MailchimpError):
    """
    A non-2xx response from the Mailchimp API, decoded from its
    problem-details JSON body.

    Attributes:
        status (int): HTTP status reported by the API.
        type (str): URL of the error type documentation.
        title (str): Short error title (e.g. "Resource Not Found").
        detail (str): Human readable explanation.
        instance (str): Unique ID of this error instance.
        errors (list): Field level validation errors, if any.
    """

    def __init__(
        self,
        status: int = 0,
        title: str = "",
        detail: str = "",
        type: str = "",
        instance: str = "",
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type = type
        self.instance = instance
        self.errors = errors or []
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.status

    def __str__(self) -> str:
        return f"Error {self.status} {self.title} ({self.detail})"


class AuthenticationError(APIError):
    """Exception raised for authentication errors (401)."""


class DecodeError(MailchimpError):
    """A response body could not be decoded."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"[Status Code: {self.status_code}] {self.message}"


class ResponseDecodeError(DecodeError):
    """A 2xx response body did not match the expected schema."""


class ErrorDecodeError(DecodeError):
    """A non-2xx response body was not a problem-details JSON object."""


class EncodeError(MailchimpError):
    """A request body could not be serialized to JSON."""


class MissingIdentifierError(MailchimpError, ValueError):
    """A resource handle lacks an identifier needed to build its path."""
