"""Error definitions for ollamaimage."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error category codes for generation operations."""

    # Retryable errors (retryable=True)
    PROVIDER_TIMEOUT = "PROVIDER_TIMEOUT"
    PROVIDER_OVERLOADED = "PROVIDER_OVERLOADED"
    RATE_LIMITED = "RATE_LIMITED"

    # Not retryable errors (retryable=False)
    INVALID_INPUT = "INVALID_INPUT"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    NOT_FOUND = "NOT_FOUND"
    PROVIDER_REJECTED = "PROVIDER_REJECTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Set of retryable error codes
RETRYABLE_ERRORS = {
    ErrorCode.PROVIDER_TIMEOUT,
    ErrorCode.PROVIDER_OVERLOADED,
    ErrorCode.RATE_LIMITED,
}


def is_retryable(code: ErrorCode) -> bool:
    """Check if an error code indicates a retryable error."""
    return code in RETRYABLE_ERRORS


def classify_status(status_code: int) -> ErrorCode:
    """Map an HTTP status code returned by the inference server to an ErrorCode."""
    if status_code in (400, 422):
        return ErrorCode.INVALID_INPUT
    if status_code in (401, 403):
        return ErrorCode.AUTHENTICATION_REQUIRED
    if status_code == 404:
        # Ollama answers 404 when the model has not been pulled
        return ErrorCode.NOT_FOUND
    if status_code == 429:
        return ErrorCode.RATE_LIMITED
    if status_code in (408, 504):
        return ErrorCode.PROVIDER_TIMEOUT
    if status_code >= 500:
        return ErrorCode.PROVIDER_OVERLOADED
    return ErrorCode.PROVIDER_REJECTED


class OllamaAPIError(Exception):
    """Raised when the inference server answers with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str):
        message = f"Ollama API error: {status_code} {status_text}"
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.message = message
        self.error_code = classify_status(status_code)

    @property
    def retryable(self) -> bool:
        """Whether an external caller could reasonably retry this request."""
        return is_retryable(self.error_code)
