"""
Shannon entropy scoring for candidate secret tokens
"""

import math
from collections import Counter
from typing import Optional

# Characters stripped from both ends of a whitespace-delimited token
WRAPPING_PUNCTUATION = "()[]{}\"';,`"

# Long but low-value shapes: paths, arrows, template interpolation, markup
CODE_MARKERS = ("::", "->", "=>", "${", "</")

MIN_TOKEN_LENGTH = 20
ENTROPY_SNIPPET_LENGTH = 20


def shannon_entropy(text: str) -> float:
    """Shannon entropy of ``text`` in bits per character"""
    if not text:
        return 0.0

    length = len(text)
    entropy = 0.0
    for count in Counter(text).values():
        probability = count / length
        entropy -= probability * math.log2(probability)

    # -0.0 for single-symbol strings
    return abs(entropy)


def clean_token(token: str) -> str:
    """Strip wrapping punctuation from a token"""
    return token.strip(WRAPPING_PUNCTUATION)


def is_entropy_candidate(token: str) -> bool:
    """Check whether a cleaned token is long enough and not code-shaped"""
    if len(token) <= MIN_TOKEN_LENGTH:
        return False
    return not any(marker in token for marker in CODE_MARKERS)


class EntropyScorer:
    """Compares token entropy against a configured threshold"""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def score(self, token: str) -> Optional[float]:
        """Return the entropy of ``token`` if it exceeds the threshold, else None"""
        entropy = shannon_entropy(token)
        if entropy > self.threshold:
            return entropy
        return None
