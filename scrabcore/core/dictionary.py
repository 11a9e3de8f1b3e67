"""In-memory word list used as the dictionary lookup capability.

The validator only needs a callable `is_valid_word(word) -> bool`. `WordList`
is the stock implementation:

- Words are stored uppercase, A-Z only.
- Lookups are case-insensitive; input is normalised the same way.
- An unassigned blank ('?') never matches.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

log = logging.getLogger("scrabcore.dictionary")

IsValidWord = Callable[[str], bool]


class DictionaryUnavailableError(ValueError):
    """Dictionary validation was requested without a word lookup."""


class WordList:
    """Set of allowed words.

    Attributes:
        words: allowed words in UPPERCASE.
    """

    def __init__(self, words: set[str]) -> None:
        self.words: frozenset[str] = frozenset(words)

    @staticmethod
    def _normalize(word: str) -> str:
        return "".join(ch for ch in word.upper() if "A" <= ch <= "Z")

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordList:
        return cls({w for w in map(cls._normalize, words) if w})

    @classmethod
    def from_path(cls, path: str | Path) -> WordList:
        """Load one word per line; blank lines and '#' comments are skipped."""
        words: set[str] = set()
        with Path(path).open(encoding="utf-8", errors="ignore") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                w = cls._normalize(line)
                if w:
                    words.add(w)
        log.info("Loaded %d words from %s", len(words), path)
        return cls(words)

    def contains(self, word: str) -> bool:
        if not word or "?" in word:
            return False
        return self._normalize(word) in self.words

    __call__ = contains

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)

    def count(self) -> int:
        return len(self.words)
