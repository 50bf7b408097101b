"""Natural language to shell command translation."""

from .command_validator import CommandValidator, ValidationOutcome, ValidationReason
from .config import TranslatorConfig
from .errors import (
    ConfigurationError,
    InputRejected,
    TranslationAmbiguous,
    TranslationError,
    TransportError,
    UpstreamError,
    ValidationFailed,
)
from .inference_client import SENTINEL, InferenceClient
from .input_classifier import InputClassifier, InputKind
from .phrase_table import LocalPhraseTable
from .response_cache import ResponseCache
from .translator import Translator

__all__ = [
    "CommandValidator",
    "ValidationOutcome",
    "ValidationReason",
    "TranslatorConfig",
    "ConfigurationError",
    "InputRejected",
    "TranslationAmbiguous",
    "TranslationError",
    "TransportError",
    "UpstreamError",
    "ValidationFailed",
    "SENTINEL",
    "InferenceClient",
    "InputClassifier",
    "InputKind",
    "LocalPhraseTable",
    "ResponseCache",
    "Translator",
]
