"""
Scan engine that applies signature, mnemonic, and entropy checks to file content
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import PurePath
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from .builtin import build_patterns
from .entropy import (
    ENTROPY_SNIPPET_LENGTH, EntropyScorer, clean_token, is_entropy_candidate,
)
from .matcher import ExclusionMatcher, normalize_path
from .mnemonic import VocabularyIndex
from .models import Finding, ScanResult, Severity, SignaturePattern

if TYPE_CHECKING:
    from ..config import WardConfig

logger = logging.getLogger(__name__)

SIGNATURE_SNIPPET_LENGTH = 50

ENV_FILE_PREFIX = ".env"
SAFE_ENV_SUFFIXES = (".example", ".sample")
ENV_FILE_ADVISORY = "Environment files must not be committed"


class ScanEngine:
    """Per-file secret detection engine built once from a resolved config"""

    def __init__(self, config: "WardConfig",
                 vocabulary: Optional[VocabularyIndex] = None):
        self.config = config
        self.patterns: List[SignaturePattern]
        self.patterns, pattern_warnings = build_patterns(config)
        self.exclusions = ExclusionMatcher(config.exclude)
        self.vocabulary = vocabulary if vocabulary is not None else VocabularyIndex()
        self.entropy = EntropyScorer(config.threshold)
        self._skip_entropy_fragments = [
            pattern.lstrip('*') for pattern in config.skip_entropy_checks
        ]
        self.warnings: List[str] = pattern_warnings + self.exclusions.warnings

        logger.debug(
            "Scan engine ready: %d signature rules, %d exclude patterns",
            len(self.patterns), len(self.exclusions.patterns)
        )

    def scan(self, path: Union[str, PurePath], content: str) -> List[Finding]:
        """Scan one file's text and return its findings in line order"""
        file_path = normalize_path(path)

        if self.exclusions.is_excluded(file_path):
            return []

        env_finding = self._check_env_file(file_path)
        if env_finding is not None:
            return [env_finding]

        skip_entropy = self._skips_entropy(file_path)
        findings: List[Finding] = []

        for line_number, line in enumerate(split_lines(content), start=1):
            findings.extend(self._match_signatures(file_path, line_number, line))
            if not skip_entropy:
                findings.extend(self._match_entropy(file_path, line_number, line))

        return findings

    def scan_file(self, path: Union[str, PurePath], content: str) -> ScanResult:
        """Scan one file and wrap the findings with timing information"""
        start_time = time.time()
        findings = self.scan(path, content)
        scan_time = (time.time() - start_time) * 1000

        return ScanResult(
            file_path=normalize_path(path),
            findings=findings,
            scan_time_ms=scan_time,
            rules_applied=len(self.patterns),
        )

    def scan_many(self, items: Iterable[Tuple[Union[str, PurePath], str]],
                  max_workers: Optional[int] = None) -> List[ScanResult]:
        """Scan several files, possibly in parallel, keeping input order"""
        items = list(items)
        if not items:
            return []
        if max_workers == 1 or len(items) == 1:
            return [self.scan_file(path, content) for path, content in items]

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda item: self.scan_file(*item), items))

    def _check_env_file(self, file_path: str) -> Optional[Finding]:
        """Flag environment files by name before any line-level work"""
        name = PurePath(file_path).name
        if not name.startswith(ENV_FILE_PREFIX) or name.endswith(SAFE_ENV_SUFFIXES):
            return None

        return Finding(
            file_path=file_path,
            line=1,
            rule=f"Environment File ({name})",
            snippet=ENV_FILE_ADVISORY,
            severity=Severity.CRITICAL,
        )

    def _skips_entropy(self, file_path: str) -> bool:
        """Check if the path matches a skip-entropy fragment"""
        return any(fragment in file_path for fragment in self._skip_entropy_fragments)

    def _match_signatures(self, file_path: str, line_number: int,
                          line: str) -> List[Finding]:
        """Apply every signature pattern to one line"""
        findings = []
        snippet = line.strip()[:SIGNATURE_SNIPPET_LENGTH]

        for pattern in self.patterns:
            if pattern.verify_mnemonic:
                matched = any(
                    self.vocabulary.is_probable_mnemonic(match.group(0))
                    for match in pattern.regex.finditer(line)
                )
            else:
                matched = pattern.regex.search(line) is not None

            if matched:
                findings.append(Finding(
                    file_path=file_path,
                    line=line_number,
                    rule=pattern.label,
                    snippet=snippet,
                    severity=pattern.severity,
                ))

        return findings

    def _match_entropy(self, file_path: str, line_number: int,
                       line: str) -> List[Finding]:
        """Flag high-entropy tokens on one line"""
        findings = []

        for word in line.split():
            token = clean_token(word)
            if not is_entropy_candidate(token):
                continue

            entropy = self.entropy.score(token)
            if entropy is None:
                continue

            findings.append(Finding(
                file_path=file_path,
                line=line_number,
                rule=f"High Entropy ({entropy:.2f})",
                snippet=token[:ENTROPY_SNIPPET_LENGTH],
                severity=Severity.MEDIUM,
            ))

        return findings

    def get_statistics(self) -> dict:
        """Get statistics about the loaded rules"""
        return {
            'total_rules': len(self.patterns),
            'rule_labels': [pattern.label for pattern in self.patterns],
            'exclude_patterns': len(self.exclusions.patterns),
            'entropy_threshold': self.config.threshold,
            'vocabulary_size': len(self.vocabulary),
            'warnings': list(self.warnings),
        }


def split_lines(content: str) -> List[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line

    Form feeds, vertical tabs and Unicode line separators stay inside their
    line so reported numbers agree with git and editors.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
