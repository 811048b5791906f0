"""
Detection engine: signature rules, mnemonic verification, entropy scoring
"""

from .engine import ScanEngine
from .entropy import EntropyScorer, shannon_entropy
from .matcher import ExclusionMatcher
from .mnemonic import VocabularyIndex
from .models import Finding, ScanResult, Severity, SignaturePattern

__all__ = [
    "ScanEngine",
    "EntropyScorer",
    "shannon_entropy",
    "ExclusionMatcher",
    "VocabularyIndex",
    "Finding",
    "ScanResult",
    "Severity",
    "SignaturePattern",
]
