"""
Staged file discovery and staged content retrieval
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when a git command cannot be run or fails"""


class StagedContentError(GitError):
    """Raised when staged content is not valid UTF-8 text"""


def _run_git(args: List[str], root: Union[str, Path]) -> subprocess.CompletedProcess:
    """Run git with ``args`` inside ``root`` and capture raw output"""
    try:
        return subprocess.run(
            ["git", *args],
            cwd=str(root),
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise GitError(f"Failed to execute git {' '.join(args)}: {e}") from e


def _toplevel(root: Union[str, Path]) -> Path:
    """Return the working tree top level containing ``root``"""
    result = _run_git(["rev-parse", "--show-toplevel"], root)
    if result.returncode != 0:
        return Path(root)
    return Path(result.stdout.decode('utf-8', errors='replace').strip())


def get_staged_files(root: Union[str, Path] = ".") -> List[Path]:
    """Return added, copied, and modified staged paths

    Paths are relative to the repository top level, whichever subdirectory
    ``root`` points at.
    """
    result = _run_git(["diff", "--cached", "--name-only", "--diff-filter=ACM"], root)

    if result.returncode != 0:
        # No HEAD yet, or not inside a repository
        logger.debug("git diff --cached failed: %s",
                     result.stderr.decode('utf-8', errors='replace').strip())
        return []

    output = result.stdout.decode('utf-8', errors='replace')
    top = _toplevel(root)
    files = []
    for line in output.splitlines():
        name = line.strip()
        if not name:
            continue
        path = Path(name)
        if (top / path).exists():
            files.append(path)

    return files


def get_staged_content(path: Union[str, Path], root: Union[str, Path] = ".") -> str:
    """Read a file's content from the index rather than the working tree"""
    path_str = Path(path).as_posix()
    result = _run_git(["show", f":{path_str}"], root)

    if result.returncode != 0:
        stderr = result.stderr.decode('utf-8', errors='replace').strip()
        raise GitError(f"git show failed for {path_str}: {stderr}")

    try:
        return result.stdout.decode('utf-8')
    except UnicodeDecodeError as e:
        raise StagedContentError(
            f"File content is not valid UTF-8 (binary?): {path_str}"
        ) from e
