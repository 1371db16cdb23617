"""
EXCEPTIONS - Domain errors raised by the prompt engines

Route handlers never see these directly: utils.handle_service_errors turns
them into HTTPException with a user-facing message.
"""


class PromptSmithError(Exception):
    """Base exception for all PromptSmith errors."""
    pass


class EmptyPromptError(PromptSmithError, ValueError):
    """Raised when the prompt, task or subject text is empty or whitespace-only."""

    def __init__(self, message: str = "Prompt required"):
        super().__init__(message)
        self.message = message


class InvalidFieldError(PromptSmithError, ValueError):
    """Raised when an enumerated field (e.g. aspect ratio) has an unsupported value."""
    pass


class GenerationError(PromptSmithError):
    """
    Failure reported by (or while reaching) the external generation gateway.

    status_code is the HTTP status the API should answer with and message
    is safe to show to the end user.
    """

    status_code = 500
    default_message = "AI gateway error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RateLimitedError(GenerationError):
    """Upstream answered HTTP 429."""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class PaymentRequiredError(GenerationError):
    """Upstream answered HTTP 402."""

    status_code = 402
    default_message = "Payment required. Please add credits to your workspace."


class UpstreamError(GenerationError):
    """Any other upstream, network or configuration failure."""
    pass
