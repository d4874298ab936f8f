"""Word list loading and lookups for move checking and generation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from scrabble.errors import FileError
from scrabble.trie import Trie

log = logging.getLogger("scrabble")


class Dictionary:
    """Accepted words, held as a set for whole-word checks and a trie for the search."""

    def __init__(self, words: Iterable[str] = ()):
        self.words: set[str] = set()
        self.trie = Trie()
        for word in words:
            self.add(word)

    @classmethod
    def read(cls, path: str) -> Dictionary:
        """Load one word per line.  Non-alphabetic lines are skipped."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                dictionary = cls(line.strip() for line in f)
        except OSError as exc:
            raise FileError(f"cannot open dictionary file {path!r}") from exc
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    def add(self, word: str) -> None:
        word = word.upper()
        if not word.isalpha() or word in self.words:
            return
        self.words.add(word)
        self.trie.insert(word)

    def is_word(self, word: str) -> bool:
        return word.upper() in self.words

    def find_prefix(self, prefix: str) -> int | None:
        """Trie node for *prefix*, or None when no word starts with it."""
        return self.trie.find_prefix(prefix.upper())

    def __len__(self) -> int:
        return len(self.words)
