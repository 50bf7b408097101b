"""Translator Configuration

Builds a single TranslatorConfig at startup from the process environment
(and an optional .env file) and hands it to the components that need it."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError


OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "meta-llama/llama-3.2-3b-instruct:free"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TranslatorConfig:
    api_key: Optional[str] = None
    api_url: str = OPENROUTER_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = 20
    temperature: float = 0.1
    request_timeout: float = 3.0
    transport_timeout: float = 5.0
    cache_ttl: float = 300.0
    cache_size: int = 100
    max_command_length: int = 200
    background_workers: int = 4
    result_queue_size: int = 16
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "TranslatorConfig":
        """Reads configuration from the environment.

        Takes in:
            env_file: Optional path to a .env file; the default search is used if None

        Gives back:
            TranslatorConfig with environment overrides applied"""
        load_dotenv(env_file)

        config = cls(
            api_key=os.getenv("OPENROUTER_API_KEY") or None,
            api_url=os.getenv("SHELL_TRANSLATOR_API_URL", OPENROUTER_URL),
            model=os.getenv("SHELL_TRANSLATOR_MODEL", DEFAULT_MODEL),
            log_level=os.getenv("SHELL_TRANSLATOR_LOG_LEVEL", "WARNING").upper(),
        )

        timeout = os.getenv("SHELL_TRANSLATOR_TIMEOUT")
        if timeout:
            try:
                config = replace(config, request_timeout=float(timeout))
            except ValueError:
                raise ConfigurationError(
                    f"SHELL_TRANSLATOR_TIMEOUT must be a number of seconds, got {timeout!r}"
                )

        config.validate()
        return config

    def validate(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level {self.log_level!r}.")
        if self.request_timeout <= 0 or self.transport_timeout <= 0:
            raise ConfigurationError("Timeouts must be positive.")
        if self.cache_size < 1:
            raise ConfigurationError("cache_size must be at least 1.")
        if self.background_workers < 1 or self.result_queue_size < 1:
            raise ConfigurationError("background_workers and result_queue_size must be at least 1.")

    def require_api_key(self) -> str:
        """Gives back the API key or raises ConfigurationError when it is not set."""
        if not self.api_key:
            raise ConfigurationError()
        return self.api_key
