"""
Pre-commit hook installation
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

HOOK_MARKER = "ward scan"
SHEBANG = "#!/bin/sh\n"

HOOK_SCRIPT = """
# gitward - local-first git guard
# This hook was automatically installed by gitward.
if command -v ward >/dev/null 2>&1; then
    ward scan || exit $?
elif python3 -c "import gitward" >/dev/null 2>&1; then
    python3 -m gitward scan || exit $?
else
    echo "gitward not found on PATH. Skipping ward scan."
fi
"""


class HookStatus(str, Enum):
    """Outcome of a hook installation attempt"""
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    NOT_A_REPOSITORY = "not_a_repository"


def render_hook(existing: str) -> str:
    """Insert the hook block into existing hook text, after any shebang"""
    if not existing:
        return SHEBANG + HOOK_SCRIPT

    if existing.startswith("#!"):
        newline = existing.find("\n")
        if newline == -1:
            return existing + "\n" + HOOK_SCRIPT
        return existing[:newline + 1] + HOOK_SCRIPT + existing[newline + 1:]

    return SHEBANG + HOOK_SCRIPT + existing


def install_hook(root: Union[str, Path] = ".") -> HookStatus:
    """Install or chain the gitward block into ``.git/hooks/pre-commit``"""
    git_dir = Path(root) / ".git"
    if not git_dir.is_dir():
        return HookStatus.NOT_A_REPOSITORY

    hooks_dir = git_dir / "hooks"
    hooks_dir.mkdir(exist_ok=True)
    pre_commit_path = hooks_dir / "pre-commit"

    existing = ""
    if pre_commit_path.exists():
        existing = pre_commit_path.read_text(encoding='utf-8')

    if HOOK_MARKER in existing:
        logger.debug("Hook already present in %s", pre_commit_path)
        return HookStatus.ALREADY_INSTALLED

    pre_commit_path.write_text(render_hook(existing), encoding='utf-8')
    os.chmod(pre_commit_path, 0o755)
    logger.debug("Wrote hook to %s", pre_commit_path)

    return HookStatus.INSTALLED
