"""Input Classifier Module

Decides what a raw line typed at the prompt is:
- already a command (passed through untouched)
- gibberish (rejected before any lookup or network call)
- natural language (sent down the translation pipeline)"""

import enum
from typing import List

from nltk.tokenize import WhitespaceTokenizer


class InputKind(enum.Enum):
    ALREADY_COMMAND = "already_command"
    GIBBERISH = "gibberish"
    NATURAL_LANGUAGE = "natural_language"


COMMAND_PREFIXES = frozenset([
    'mkdir', 'ls', 'cd', 'rm', 'cp', 'mv', 'git', 'curl', 'wget',
    'sudo', 'chmod', 'grep', 'open',
])

# Any of these anywhere in the text means it is never gibberish.
MEANINGFUL_WORDS = (
    'open', 'cursor', 'vscode', 'editor', 'ide', 'folder', 'directory',
    'file', 'this', 'here', 'current',
)

INCOHERENT_PATTERNS = (
    'how hello', 'hello how', 'what hello', 'hello what',
    'why hello', 'hello why', 'when hello', 'hello when',
    'where hello', 'hello where', 'who hello', 'hello who',
    'how what', 'what how', 'why what', 'what why',
    'how are', 'what are', 'why are', 'when are', 'where are', 'who are',
    'hello world', 'world hello', 'test hello', 'hello test',
)

QUESTION_WORDS = frozenset(['how', 'what', 'why', 'when', 'where', 'who', 'which'])

ACTION_VERBS = frozenset([
    'create', 'make', 'delete', 'remove', 'list', 'show', 'find', 'search',
    'copy', 'move', 'download', 'install', 'update', 'open', 'close', 'start', 'stop',
])

NATURAL_INDICATORS = (
    'create a', 'make a', 'delete', 'remove', 'list', 'show me', 'find',
    'search for', 'copy', 'move', 'download', 'install', 'update',
    'how to', 'i want to', 'can you', 'please', 'help me',
    'open this', 'open file', 'open in', 'launch', 'start',
    'open folder', 'open current', 'open here', 'open directory',
    'cursor', 'vscode', 'editor', 'ide',
)

MAX_REPEATED_RUN = 4
MIN_PATTERN_LENGTH = 6
PATTERN_PERIODS = (2, 3)


class InputClassifier:
    """Rule-based classifier for raw prompt input. Stateless."""

    def __init__(self):
        self.tokenizer = WhitespaceTokenizer()

    def tokenize(self, text: str) -> List[str]:
        return self.tokenizer.tokenize(text)

    def classify(self, text: str) -> InputKind:
        """Classify a raw line.

        Takes in:
            text: Raw user input

        Gives back:
            InputKind for the text"""
        if self.is_already_command(text):
            return InputKind.ALREADY_COMMAND
        if self.is_gibberish(text):
            return InputKind.GIBBERISH
        return InputKind.NATURAL_LANGUAGE

    def is_already_command(self, text: str) -> bool:
        words = self.tokenize(text.strip().lower())
        return bool(words) and words[0] in COMMAND_PREFIXES

    def is_natural_language(self, text: str) -> bool:
        """Checks whether text reads like a request rather than a command.
        Text that is neither a command nor gibberish but has none of the
        indicators is still translated; this only reports the indicators.

        Takes in:
            text: Raw user input

        Gives back:
            true if it contains a natural language indicator"""
        if self.is_already_command(text) or self.is_gibberish(text):
            return False
        text_lower = text.strip().lower()
        return any(indicator in text_lower for indicator in NATURAL_INDICATORS)

    def is_gibberish(self, text: str) -> bool:
        """Checks whether input appears to be gibberish or nonsensical.

        Takes in:
            text: Raw user input

        Gives back:
            true if any gibberish rule matches"""
        text_lower = text.strip().lower()

        if len(text_lower) < 2:
            return True

        if any(word in text_lower for word in MEANINGFUL_WORDS):
            return False

        if self._has_repeated_run(text_lower):
            return True

        if not any(ch.isalnum() for ch in text_lower):
            return True

        if self._has_short_period(text_lower):
            return True

        if any(pattern in text_lower for pattern in INCOHERENT_PATTERNS):
            return True

        words = self.tokenize(text_lower)
        if len(words) <= 3:
            has_question = any(word in QUESTION_WORDS for word in words)
            has_action = any(word in ACTION_VERBS for word in words)
            if has_question and not has_action:
                return True

        return False

    @staticmethod
    def _has_repeated_run(text: str) -> bool:
        run = 1
        for i in range(1, len(text)):
            if text[i] == text[i - 1]:
                run += 1
                if run >= MAX_REPEATED_RUN:
                    return True
            else:
                run = 1
        return False

    @staticmethod
    def _has_short_period(text: str) -> bool:
        """True when the whole text repeats with period 2 ("ababab") or 3 ("sdasdasda")."""
        if len(text) < MIN_PATTERN_LENGTH:
            return False
        for period in PATTERN_PERIODS:
            if all(text[i] == text[i - period] for i in range(period, len(text))):
                return True
        return False
