"""Inference Client

Asks an OpenRouter-compatible chat completion endpoint to turn a request into
one shell command. One attempt per call, bounded by a short caller timeout."""

import logging
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, Optional

import requests

from .command_validator import strip_code_fences
from .config import TranslatorConfig
from .errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


SENTINEL = "I_DONT_UNDERSTAND"

PROMPT_TEMPLATE = """You are a Linux terminal command generator. Your task is to convert natural language requests into valid Linux commands.

IMPORTANT RULES:
- If the input is gibberish, nonsense, or doesn't make sense (like 'how hello', 'what is', 'hello world'), respond with exactly: "{sentinel}"
- If the input is not a valid command request, respond with exactly: "{sentinel}"
- If the input contains question words without meaningful command context, respond with exactly: "{sentinel}"
- Only respond with a valid Linux command if you can clearly understand the request
- Do NOT return the same input as output
- Do NOT try to interpret incoherent phrases as commands
- Respond ONLY with the command itself, no explanations, no markdown, no quotes
- For filenames with spaces, use quotes: "file name" or 'file name'

SPECIAL HANDLING FOR EDITORS/IDEs:
- "open this folder in cursor" -> "cursor ."
- "open current folder in vscode" -> "code ."
- "open here in editor" -> "cursor ."
- "open directory in ide" -> "cursor ."

SPECIAL HANDLING FOR GUI FILE MANAGERS:
- "open this folder in gui" -> "xdg-open ."
- "open current folder in file manager" -> "xdg-open ."

Examples:
- Input: "list files" -> Output: "ls"
- Input: "create folder test" -> Output: "mkdir test"
- Input: "remove hello" -> Output: "rm hello"
- Input: "remove hello folder" -> Output: "rm -r hello"
- Input: "delete test directory" -> Output: "rm -r test"
- Input: "remove my folder" -> Output: "rm -r "my folder""
- Input: "delete old file" -> Output: "rm "old file""
- Input: "remove SEM 3 folder" -> Output: "rm -r "SEM 3""
- Input: "open current directory in vscode" -> Output: "code ."
- Input: "sdasdasdasdas" -> Output: "{sentinel}"
- Input: "what is the meaning of life" -> Output: "{sentinel}"
- Input: "hello world" -> Output: "{sentinel}"

Natural language: {request}

Command:"""


def build_prompt(natural_input: str) -> str:
    return PROMPT_TEMPLATE.format(sentinel=SENTINEL, request=natural_input)


class InferenceClient:
    """Single-shot client for the command generation model."""

    def __init__(self, config: TranslatorConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def build_payload(self, natural_input: str) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [{"role": "user", "content": build_prompt(natural_input)}],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    def complete(self, natural_input: str) -> str:
        """Asks the model for a command.

        Takes in:
            natural_input: The user's request

        Gives back:
            raw candidate command text (not validated), possibly the sentinel"""
        api_key = self.config.require_api_key()
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(natural_input)

        future = self._start_post(headers, payload)
        try:
            response = future.result(timeout=self.config.request_timeout)
        except FutureTimeoutError:
            logger.warning("Inference request timed out after %.1fs", self.config.request_timeout)
            raise TransportError()
        except requests.RequestException as exc:
            logger.warning("Inference request failed: %s", exc)
            raise TransportError(f"Could not reach the translation service: {exc}")

        if not response.ok:
            logger.warning("Inference service returned %s", response.status_code)
            raise UpstreamError(response.status_code, response.text)

        try:
            return self.extract_command(response.json())
        except (ValueError, AttributeError, TypeError):
            raise UpstreamError(response.status_code, response.text)

    def _start_post(self, headers: Dict[str, str], payload: Dict[str, Any]) -> Future:
        """Starts the POST on its own thread so the caller's timeout counts from
        the moment the request is sent. The thread ends on transport_timeout
        even after the caller has stopped waiting."""
        future: Future = Future()

        def run() -> None:
            try:
                future.set_result(self._post(headers, payload))
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=run, name="inference", daemon=True).start()
        return future

    def _post(self, headers: Dict[str, str], payload: Dict[str, Any]) -> requests.Response:
        return self.session.post(
            self.config.api_url,
            headers=headers,
            json=payload,
            timeout=self.config.transport_timeout,
        )

    @staticmethod
    def extract_command(data: Dict[str, Any]) -> str:
        """Pulls the first choice's text out of a chat completion response."""
        choices = data.get("choices") or []
        if not choices:
            return ""
        message = choices[0].get("message") or {}
        content = message.get("content") or ""
        return strip_code_fences(content)

    def close(self) -> None:
        self.session.close()
