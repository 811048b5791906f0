"""
Test cases for mnemonic vocabulary verification
"""

import pytest

from gitward.rules.mnemonic import VocabularyIndex, load_wordlist


@pytest.fixture(scope="module")
def vocabulary():
    return VocabularyIndex()


class TestVocabularyIndex:
    """Test the BIP-39 word index"""

    def test_reference_wordlist_size(self, vocabulary):
        """The English wordlist has 2048 entries"""
        assert len(vocabulary) == 2048
        assert len(load_wordlist()) == 2048

    def test_membership_is_case_insensitive(self, vocabulary):
        """Lookups lower-case the word first"""
        assert "abandon" in vocabulary
        assert "Zoo" in vocabulary
        assert "xylophonez" not in vocabulary

    def test_custom_words(self):
        """An index can be built from an explicit word list"""
        index = VocabularyIndex(["Alpha", "beta"])
        assert "alpha" in index
        assert index.count_known(["alpha", "BETA", "gamma"]) == 2


class TestProbableMnemonic:
    """Test the 90% acceptance rule"""

    def setup_method(self):
        """Set up test fixtures"""
        self.index = VocabularyIndex(["word"])

    def test_all_known(self):
        """Every word known passes"""
        assert self.index.is_probable_mnemonic(" ".join(["word"] * 12))

    def test_eleven_of_twelve_passes(self):
        """110 >= 108 under the integer formula"""
        assert self.index.is_probable_mnemonic(" ".join(["word"] * 11 + ["nope"]))

    def test_ten_of_twelve_fails(self):
        """100 < 108 under the integer formula"""
        assert not self.index.is_probable_mnemonic(" ".join(["word"] * 10 + ["nope"] * 2))

    def test_nine_of_ten_boundary(self):
        """Exactly 90% passes"""
        assert self.index.is_probable_mnemonic(" ".join(["word"] * 9 + ["nope"]))

    def test_empty_phrase(self):
        """An empty phrase is never a mnemonic"""
        assert not self.index.is_probable_mnemonic("   ")
