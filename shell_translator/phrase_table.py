"""Local Phrase Table

Static phrase -> command mapping consulted before any cache or network work.
Built once, never modified."""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


DEFAULT_PHRASES: Dict[str, str] = {
    'list files': 'ls',
    'show files': 'ls',
    'list directory': 'ls',
    'show directory': 'ls',
    'what files are here': 'ls',
    'see files': 'ls',

    'list all files': 'ls -la',
    'show all files': 'ls -la',
    'list hidden files': 'ls -la',
    'show hidden files': 'ls -la',

    'go up': 'cd ..',
    'go back': 'cd ..',
    'go to parent': 'cd ..',
    'up one level': 'cd ..',

    'go home': 'cd ~',
    'go to home': 'cd ~',
    'home directory': 'cd ~',

    'show current directory': 'pwd',
    'where am i': 'pwd',
    'current location': 'pwd',
    'print working directory': 'pwd',

    'clear screen': 'clear',
    'clear terminal': 'clear',
    'clean screen': 'clear',

    'show date': 'date',
    'what time is it': 'date',
    'current time': 'date',

    'show calendar': 'cal',
    'calendar': 'cal',
    'show month': 'cal',

    'remove folder': 'rm -r',
    'delete folder': 'rm -r',
    'remove directory': 'rm -r',
    'delete directory': 'rm -r',
}

# Exact-match only. Too short to be used for substring matching
# ("up" would match "update", "home" would match "homebrew").
INSTANT_COMMANDS: Dict[str, str] = {
    'dir': 'ls',
    'dir /a': 'ls -la',
    'up': 'cd ..',
    'back': 'cd ..',
    'home': 'cd ~',
    'current directory': 'pwd',
    'cls': 'clear',
    'time': 'date',
}


class LocalPhraseTable:
    """Phrase lookup with exact then substring matching.

    When several phrases overlap the text, the longest phrase wins and equal
    lengths are broken alphabetically, so "list all files" beats "list files"."""

    def __init__(self, phrases: Optional[Mapping[str, str]] = None,
                 instant: Optional[Mapping[str, str]] = None):
        source = DEFAULT_PHRASES if phrases is None else phrases
        normalized = {self.normalize(key): command for key, command in source.items()}
        self.phrases: Mapping[str, str] = MappingProxyType(normalized)

        source = INSTANT_COMMANDS if instant is None else instant
        self.instant: Mapping[str, str] = MappingProxyType(
            {self.normalize(key): command for key, command in source.items()}
        )

        self._search_order: Tuple[str, ...] = tuple(
            sorted(self.phrases, key=lambda key: (-len(key), key))
        )

    @staticmethod
    def normalize(text: str) -> str:
        return text.strip().lower()

    def lookup(self, text: str) -> Optional[str]:
        """Looks up a command for the text.

        Takes in:
            text: Raw user input

        Gives back:
            mapped command or None"""
        normalized = self.normalize(text)
        if not normalized:
            return None

        if normalized in self.phrases:
            return self.phrases[normalized]
        if normalized in self.instant:
            return self.instant[normalized]

        for key in self._search_order:
            if key in normalized or normalized in key:
                logger.debug("Phrase %r matched %r", key, normalized)
                return self.phrases[key]

        return None

    def __len__(self) -> int:
        return len(self.phrases) + len(self.instant)

    def __contains__(self, text: str) -> bool:
        normalized = self.normalize(text)
        return normalized in self.phrases or normalized in self.instant
