# app/backend/core/exceptions.py

class WritingAssistantError(Exception):
    def __init__(self, message: str = "Failed to process text"):
        super().__init__(message)
        self.message = message


class ProviderError(WritingAssistantError):
    """A text provider failed to produce a result."""

    def __init__(self, message: str = "Failed to process text", provider: str = ""):
        super().__init__(message)
        self.provider = provider


class ProviderNotConfiguredError(ProviderError):
    """The selected provider has no API key."""
