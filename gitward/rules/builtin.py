"""
Built-in signature patterns and custom rule compilation
"""

import logging
import re
from typing import Iterable, List, Tuple

from .models import SignaturePattern, Severity

logger = logging.getLogger(__name__)

ETHEREUM_PRIVATE_KEY = "Ethereum Private Key"
BIP39_MNEMONIC = "BIP-39 Mnemonic"
GENERIC_API_KEY = "Generic API Key"

BUILTIN_PATTERNS: List[SignaturePattern] = [
    SignaturePattern(
        label=ETHEREUM_PRIVATE_KEY,
        regex=re.compile(r"0x[a-f0-9]{64}", re.IGNORECASE),
        severity=Severity.CRITICAL,
    ),
    SignaturePattern(
        label=BIP39_MNEMONIC,
        regex=re.compile(r"(\b[a-z]{3,}\b\s){11,}\b[a-z]{3,}\b", re.IGNORECASE),
        severity=Severity.CRITICAL,
        verify_mnemonic=True,
    ),
    SignaturePattern(
        label=GENERIC_API_KEY,
        regex=re.compile(
            r"(api_key|access_token|secret_key)[\s:=]+['\"]?[a-zA-Z0-9_\-]{20,}",
            re.IGNORECASE,
        ),
        severity=Severity.HIGH,
    ),
]


def compile_custom_rules(rules: Iterable) -> Tuple[List[SignaturePattern], List[str]]:
    """
    Compile user-defined rules in order.

    A rule whose regex does not compile is dropped and described in the
    returned warnings instead of raising.
    """
    patterns: List[SignaturePattern] = []
    warnings: List[str] = []

    for rule in rules:
        try:
            regex = re.compile(rule.regex)
        except re.error as e:
            message = f"Skipping custom rule {rule.name!r}: invalid regex ({e})"
            logger.warning(message)
            warnings.append(message)
            continue

        patterns.append(SignaturePattern(
            label=rule.name,
            regex=regex,
            severity=rule.severity,
        ))

    return patterns, warnings


def build_patterns(config) -> Tuple[List[SignaturePattern], List[str]]:
    """Built-in patterns followed by the config's custom rules"""
    custom, warnings = compile_custom_rules(config.rules)
    return list(BUILTIN_PATTERNS) + custom, warnings
