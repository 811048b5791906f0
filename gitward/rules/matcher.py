"""
Path exclusion using gitignore-style pattern semantics
"""

import logging
from pathlib import PurePath
from typing import List, Optional, Sequence, Union
import pathspec

logger = logging.getLogger(__name__)


class ExclusionMatcher:
    """Decides whether a repository-relative path is skipped entirely"""

    def __init__(self, patterns: Optional[Sequence[str]] = None):
        self.patterns: List[str] = []
        self.warnings: List[str] = []
        self._spec: Optional[pathspec.PathSpec] = None

        for pattern in patterns or []:
            if self._is_valid(pattern):
                self.patterns.append(pattern)
            else:
                message = f"Skipping invalid exclude pattern: {pattern!r}"
                logger.warning(message)
                self.warnings.append(message)

        if self.patterns:
            self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    @staticmethod
    def _is_valid(pattern: str) -> bool:
        """Check if a single pattern line compiles"""
        try:
            pathspec.GitIgnoreSpec.from_lines([pattern])
        except (ValueError, TypeError):
            return False
        return True

    def is_excluded(self, path: Union[str, PurePath]) -> bool:
        """Check if a path, or any of its parent directories, is excluded"""
        if self._spec is None:
            return False
        return self._spec.match_file(normalize_path(path))


def normalize_path(path: Union[str, PurePath]) -> str:
    """Render a path with forward slashes and no leading ``./``"""
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text
