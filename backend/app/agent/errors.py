from typing import Any


class CompletionError(Exception):
    """Base class for failures of a text completion call."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(CompletionError):
    """The provider answered, but with an error status and body."""

    def __init__(self, status: int, body: Any):
        super().__init__(f"Provider returned status {status}")
        self.status = status
        self.body = body


class TransportError(CompletionError):
    """No usable response could be obtained from the provider."""
