"""Translator Module

Main pipeline that turns a typed line into a command:
- passes through text that is already a command
- rejects gibberish
- answers common phrases from the local table
- answers repeated requests from the response cache
- otherwise asks the inference service and validates what comes back

translate() blocks; request_translation() runs the same pipeline in the
background and delivers successes through a queue polled by the caller."""

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Set

from .command_validator import CommandValidator
from .config import TranslatorConfig
from .errors import InputRejected, TranslationAmbiguous, TranslationError, ValidationFailed
from .inference_client import SENTINEL, InferenceClient
from .input_classifier import InputClassifier, InputKind
from .phrase_table import LocalPhraseTable
from .response_cache import ResponseCache

logger = logging.getLogger(__name__)


class Translator:
    """Natural language to shell command translation pipeline."""

    def __init__(self, config: Optional[TranslatorConfig] = None,
                 classifier: Optional[InputClassifier] = None,
                 phrase_table: Optional[LocalPhraseTable] = None,
                 cache: Optional[ResponseCache] = None,
                 validator: Optional[CommandValidator] = None,
                 inference: Optional[InferenceClient] = None):
        """Sets up the translator. Any component left as None is built from config.

        Takes in:
            config: TranslatorConfig built once at startup"""
        self.config = config or TranslatorConfig()
        self.classifier = classifier or InputClassifier()
        self.phrase_table = phrase_table or LocalPhraseTable()
        self.cache = cache or ResponseCache(
            ttl=self.config.cache_ttl, max_entries=self.config.cache_size
        )
        self.validator = validator or CommandValidator()
        self.inference = inference or InferenceClient(self.config)

        self.results: "queue.Queue[str]" = queue.Queue(maxsize=self.config.result_queue_size)
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.background_workers,
            thread_name_prefix="translator",
        )
        self._pending: Set[str] = set()
        self._pending_lock = threading.Lock()

    def translate(self, text: str) -> str:
        """Translate a typed line into a command.

        Takes in:
            text: Raw user input

        Gives back:
            command string; raises a TranslationError subclass on failure"""
        kind = self.classifier.classify(text)

        if kind is InputKind.ALREADY_COMMAND:
            return text

        if kind is InputKind.GIBBERISH:
            logger.debug("Rejected gibberish input %r", text)
            raise InputRejected()

        local = self.phrase_table.lookup(text)
        if local is not None:
            logger.debug("Local phrase hit for %r -> %r", text, local)
            return local

        cached = self.cache.get(text)
        if cached is not None:
            logger.debug("Cache hit for %r -> %r", text, cached)
            return cached

        candidate = self.inference.complete(text)
        command = self._accept_candidate(text, candidate)

        self.cache.put(text, command)
        logger.debug("Translated %r -> %r", text, command)
        return command

    def _accept_candidate(self, text: str, candidate: str) -> str:
        """Gives back candidate if it passes every check, otherwise raises."""
        if candidate == SENTINEL:
            raise TranslationAmbiguous()

        if candidate == text.strip():
            raise TranslationAmbiguous()

        if (not candidate
                or len(candidate) > self.config.max_command_length
                or not any(ch.isalnum() for ch in candidate)):
            raise TranslationAmbiguous()

        outcome = self.validator.check(candidate)
        if not outcome.valid:
            raise ValidationFailed(candidate=candidate, reason=outcome.reason)

        return candidate

    def request_translation(self, text: str) -> bool:
        """Fire-and-forget translation. A successful command is put on
        self.results; failures are dropped. A text already being translated
        in the background is not submitted again.

        Takes in:
            text: Raw user input

        Gives back:
            true if work was scheduled"""
        with self._pending_lock:
            if text in self._pending:
                return False
            self._pending.add(text)

        try:
            self._executor.submit(self._translate_in_background, text)
        except RuntimeError:
            # executor already shut down
            with self._pending_lock:
                self._pending.discard(text)
            return False
        return True

    def _translate_in_background(self, text: str) -> None:
        try:
            command = self.translate(text)
        except TranslationError as exc:
            logger.debug("Background translation of %r dropped: %s", text, exc)
            return
        except Exception:
            logger.exception("Unexpected error translating %r in the background", text)
            return
        finally:
            with self._pending_lock:
                self._pending.discard(text)

        try:
            self.results.put_nowait(command)
        except queue.Full:
            logger.debug("Result queue full, dropping %r", command)

    def poll_result(self, timeout: Optional[float] = None) -> Optional[str]:
        """Gives back the next background result, or None if none arrives.
        Does not block when timeout is None."""
        try:
            if timeout is None:
                return self.results.get_nowait()
            return self.results.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        self.inference.close()

    def __enter__(self) -> "Translator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
