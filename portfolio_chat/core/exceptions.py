"""
Custom Exceptions - Application-specific error classes.

Every exception carries the HTTP status it maps to. The API layer turns
them into a JSON body of the form {"error": "<message>"}.
"""


class PortfolioChatError(Exception):
    """
    Base exception for all chat relay errors.

    Subclass this for specific error types.
    """
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {"error": self.message}


class ValidationError(PortfolioChatError):
    """Raised when the request body does not carry a usable message."""
    status_code = 400

    def __init__(self, message: str = "Message is required and must be a string"):
        super().__init__(message)


class ConfigurationError(PortfolioChatError):
    """Raised when the Groq API key is missing from the environment."""
    status_code = 500

    def __init__(
        self,
        message: str = (
            "Groq API key is not configured. "
            "Please set GROQ_API_KEY in your environment variables."
        ),
    ):
        super().__init__(message)


class UpstreamError(PortfolioChatError):
    """
    Raised when the Groq API answers the answer call with a non-2xx status.

    The HTTP status of the relay response mirrors the upstream one.
    """

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Groq API error: {status_code}")
        self.status_code = status_code
        self.body = body


class UnexpectedError(PortfolioChatError):
    """Wraps any other failure that reaches the request boundary."""
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message or "Internal server error")
