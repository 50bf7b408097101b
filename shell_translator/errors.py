"""Translation Errors

Every failure in the translation pipeline is raised as one of these.
Callers should branch on the class, not on the message text."""

from typing import Optional


class TranslationError(Exception):
    """Base class for all translation failures."""

    default_message = "Translation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConfigurationError(TranslationError):
    """Required configuration (e.g. the API credential) is missing or invalid."""

    default_message = (
        "OPENROUTER_API_KEY environment variable not set. "
        "Please set it with: export OPENROUTER_API_KEY='your_api_key_here'"
    )


class InputRejected(TranslationError):
    """Input was classified as gibberish and never sent anywhere."""

    default_message = (
        "I don't understand that input. "
        "Please provide a clear command or natural language request."
    )


class TranslationAmbiguous(TranslationError):
    """The model could not (or did not) produce a usable command."""

    default_message = "I don't understand that request. Please try rephrasing your command."


class ValidationFailed(TranslationError):
    """The proposed command does not start with anything runnable."""

    default_message = "The suggested command is not available on this system."

    def __init__(self, message: Optional[str] = None, candidate: str = "", reason=None):
        super().__init__(message)
        self.candidate = candidate
        self.reason = reason


class TransportError(TranslationError):
    """Timed out or could not reach the inference service."""

    default_message = "The translation service did not respond in time."


class UpstreamError(TranslationError):
    """The inference service answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body
