"""Command Validator

Checks that a proposed command line starts with something this system can run:
- a builtin the front end handles itself (cd) or a known launcher
- a path to an executable file
- an executable found in one of the PATH directories"""

import enum
import os
import stat
from typing import NamedTuple, Optional

from nltk.tokenize import WhitespaceTokenizer


BUILTINS = frozenset(['cd', 'cursor', 'code', 'xdg-open'])

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# Windows has no permission bits; a regular file is enough there.
HAS_PERMISSION_BITS = os.name != "nt"


class ValidationReason(enum.Enum):
    EMPTY = "empty"
    LEADING_DASH = "leading_dash"
    NOT_EXECUTABLE = "not_executable"


class ValidationOutcome(NamedTuple):
    valid: bool
    reason: Optional[ValidationReason] = None

    def __bool__(self) -> bool:
        return self.valid


def strip_code_fences(text: str) -> str:
    """Removes a leading ```bash / ``` marker and a trailing ``` marker."""
    cleaned = text.strip()
    for fence in ("```bash", "```"):
        if cleaned.startswith(fence):
            cleaned = cleaned[len(fence):]
            break
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def is_executable_file(path: str) -> bool:
    try:
        st = os.stat(path)
    except OSError:
        return False
    if not stat.S_ISREG(st.st_mode):
        return False
    if not HAS_PERMISSION_BITS:
        return True
    return bool(st.st_mode & EXECUTABLE_BITS)


class CommandValidator:
    def __init__(self, path: Optional[str] = None):
        """Sets up the validator.

        Takes in:
            path: Fixed PATH string to search; the live PATH environment
                  variable is read on every check when None"""
        self.path = path
        self.tokenizer = WhitespaceTokenizer()

    def looks_valid(self, candidate: str) -> bool:
        return self.check(candidate).valid

    def check(self, candidate: str) -> ValidationOutcome:
        """Validates the leading token of a candidate command.

        Takes in:
            candidate: Proposed command line

        Gives back:
            ValidationOutcome with the reason when invalid"""
        cleaned = strip_code_fences(candidate)
        tokens = self.tokenizer.tokenize(cleaned)
        if not tokens:
            return ValidationOutcome(False, ValidationReason.EMPTY)

        first = tokens[0]

        if first in BUILTINS:
            return ValidationOutcome(True)

        if first.startswith('-'):
            return ValidationOutcome(False, ValidationReason.LEADING_DASH)

        if self._has_separator(first):
            if is_executable_file(first):
                return ValidationOutcome(True)
            return ValidationOutcome(False, ValidationReason.NOT_EXECUTABLE)

        if self.find_executable(first) is not None:
            return ValidationOutcome(True)
        return ValidationOutcome(False, ValidationReason.NOT_EXECUTABLE)

    def find_executable(self, name: str) -> Optional[str]:
        """Gives back the full path of the first executable called name on PATH, or None."""
        path = self.path if self.path is not None else os.environ.get("PATH", os.defpath)
        for directory in path.split(os.pathsep):
            if not directory:
                continue
            full = os.path.join(directory, name)
            if is_executable_file(full):
                return full
        return None

    @staticmethod
    def _has_separator(token: str) -> bool:
        if os.sep in token:
            return True
        return bool(os.altsep) and os.altsep in token
