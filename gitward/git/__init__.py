"""
Git integration: staged files and the pre-commit hook
"""

from .hook import HookStatus, install_hook
from .staged import GitError, StagedContentError, get_staged_content, get_staged_files

__all__ = [
    "HookStatus",
    "install_hook",
    "GitError",
    "StagedContentError",
    "get_staged_content",
    "get_staged_files",
]
