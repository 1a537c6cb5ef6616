"""
Inquiry Interview - Custom Exceptions.

Defines a hierarchy of domain-specific exceptions for clean error handling.
"""


class InterviewAIError(Exception):
    """Base exception for all Inquiry Interview errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


# -----------------------------------------------------------------------------
# Configuration Errors
# -----------------------------------------------------------------------------

class ConfigurationError(InterviewAIError):
    """Raised when configuration is invalid or missing."""
    pass


class MissingAPIKeyError(ConfigurationError):
    """Raised when a required API key is missing."""

    def __init__(self, key_name: str):
        super().__init__(
            message=f"Missing required API key: {key_name}",
            details="Please set this in your .env file or environment variables",
        )


class CatalogError(ConfigurationError):
    """
    Raised when the question catalog is malformed or a (category, phase)
    pair is requested that the catalog does not define.

    The classifier and the phase controller are the only producers of
    categories and phases, so this signals a programming error rather
    than a recoverable runtime condition.
    """
    pass


# -----------------------------------------------------------------------------
# LLM Errors
# -----------------------------------------------------------------------------

class LLMError(InterviewAIError):
    """Base exception for LLM-related errors."""
    pass


class LLMConnectionError(LLMError):
    """Raised when unable to connect to the LLM service."""

    def __init__(self, service: str, reason: str):
        super().__init__(
            message=f"Failed to connect to {service}",
            details=reason,
        )


class LLMRateLimitError(LLMError):
    """Raised when rate limited by the LLM service."""

    def __init__(self, service: str, retry_after: int | None = None):
        self.retry_after = retry_after
        super().__init__(
            message=f"Rate limited by {service}",
            details=f"Retry after {retry_after}s" if retry_after else None,
        )


class LLMResponseError(LLMError):
    """Raised when the LLM returns an invalid or blocked response."""
    pass


class LLMTimeoutError(LLMError):
    """Raised when the LLM does not answer within the render timeout."""

    def __init__(self, service: str, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            message=f"{service} did not respond in time",
            details=f"Timed out after {timeout_seconds:.1f}s",
        )
