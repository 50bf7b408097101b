"""Shell Translator CLI

Small front end for the translator:
- shell-translator "remove my old folder"   translate once and print
- shell-translator                          interactive prompt with history

Commands are only printed, never executed."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

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
from .translator import Translator


try:
    import readline
except ImportError:
    readline = None


class Colors:
    RESET = "\033[0m"
    DIM = "\033[2m"

    FG_RED = "\033[31m"
    FG_GREEN = "\033[32m"
    FG_YELLOW = "\033[33m"
    FG_CYAN = "\033[36m"


def describe_error(exc: TranslationError) -> str:
    """Picks the message shown for a failed translation from the error's class."""
    if isinstance(exc, InputRejected):
        return "I don't understand that input. Try a clear command or request."
    if isinstance(exc, TranslationAmbiguous):
        return "I don't understand that request. Please try rephrasing it."
    if isinstance(exc, ValidationFailed):
        return f"Suggested command is not available here: {exc.candidate}"
    if isinstance(exc, TransportError):
        return "Translation timed out. Check your connection and try again."
    if isinstance(exc, UpstreamError):
        return f"Translation service error ({exc.status_code})."
    if isinstance(exc, ConfigurationError):
        return exc.message
    return str(exc)


class TranslatorShell:
    def __init__(self, translator: Translator) -> None:
        self.translator = translator
        self.running = True
        self.history_path = Path.home() / ".shell_translator_history"
        self._init_readline()

    def _init_readline(self) -> None:
        if readline is None:
            return

        try:
            readline.read_history_file(str(self.history_path))
        except (FileNotFoundError, OSError):
            pass

        readline.set_history_length(1000)

    def _save_history(self) -> None:
        if readline is None:
            return
        try:
            readline.write_history_file(str(self.history_path))
        except OSError:
            pass

    def translate_line(self, line: str) -> int:
        """Translate one line and print the outcome.

        Takes in:
            line: User input line

        Gives back:
            0 on success, 1 on failure"""
        try:
            command = self.translator.translate(line)
        except TranslationError as exc:
            print(f"{Colors.FG_YELLOW}{describe_error(exc)}{Colors.RESET}")
            return 1

        print(f"{Colors.DIM}→ {Colors.RESET}{Colors.FG_GREEN}{command}{Colors.RESET}")
        return 0

    def run(self) -> None:
        print(f"{Colors.FG_CYAN}Shell translator ready. Type 'exit' to leave.{Colors.RESET}")
        print()

        while self.running:
            try:
                line = input("> ")
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            line = line.strip()
            if not line:
                continue
            if line in ("exit", "quit"):
                break

            self.translate_line(line)

        self._save_history()


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    try:
        config = TranslatorConfig.from_env()
    except ConfigurationError as exc:
        print(f"{Colors.FG_RED}{exc.message}{Colors.RESET}")
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    with Translator(config) as translator:
        shell = TranslatorShell(translator)
        if args:
            return shell.translate_line(" ".join(args))
        shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
