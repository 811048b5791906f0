"""
BIP-39 vocabulary used to confirm seed-phrase candidates
"""

from typing import FrozenSet, Iterable, Optional
from mnemonic import Mnemonic

WORDLIST_LANGUAGE = "english"


def load_wordlist(language: str = WORDLIST_LANGUAGE) -> FrozenSet[str]:
    """Load the reference BIP-39 wordlist as a lowercase set"""
    return frozenset(word.strip().lower() for word in Mnemonic(language).wordlist)


class VocabularyIndex:
    """Immutable membership index over mnemonic words"""

    def __init__(self, words: Optional[Iterable[str]] = None):
        if words is None:
            self._words = load_wordlist()
        else:
            self._words = frozenset(word.lower() for word in words)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def count_known(self, words: Iterable[str]) -> int:
        """Count how many of ``words`` are in the vocabulary"""
        return sum(1 for word in words if word.lower() in self._words)

    def is_probable_mnemonic(self, phrase: str) -> bool:
        """
        Check whether at least 90% of the phrase's words are known.

        Integer comparison keeps the boundary exact: 11 of 12 words passes,
        10 of 12 does not.
        """
        words = phrase.split()
        if not words:
            return False
        matched = self.count_known(words)
        return matched * 10 >= len(words) * 9
