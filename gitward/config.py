"""
Configuration loading for gitward

Settings come from ``.ward.yaml`` (or ``ward.yaml``) in the repository root,
plus exclusion lines from ``.wardignore``.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union
import yaml
from pydantic import BaseModel, Field, ValidationError

from .rules.models import Severity

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".ward.yaml", "ward.yaml")
LEGACY_CONFIG_FILENAME = "ward.toml"
IGNORE_FILENAME = ".wardignore"

DEFAULT_THRESHOLD = 4.5
DEFAULT_EXCLUDE = ["*.lock", "package-lock.json", "yarn.lock"]
DEFAULT_SKIP_ENTROPY_CHECKS = ["*.min.js", "*.svg"]


class ConfigError(Exception):
    """Raised when a config file exists but cannot be used"""


class CustomRule(BaseModel):
    """User-defined signature rule"""
    name: str = Field(..., description="Rule label reported in findings")
    regex: str = Field(..., description="Regular expression source")
    severity: Severity = Field(default=Severity.HIGH, description="Severity of a match")

    class Config:
        """Pydantic configuration"""
        frozen = True


class WardConfig(BaseModel):
    """Resolved scanner configuration"""
    exclude: List[str] = Field(default_factory=list, description="Ignore-file style exclusion patterns")
    skip_entropy_checks: List[str] = Field(
        default_factory=list,
        description="Path substrings exempt from entropy analysis"
    )
    threshold: float = Field(default=DEFAULT_THRESHOLD, description="Entropy cutoff")
    rules: List[CustomRule] = Field(default_factory=list, description="Custom signature rules")

    class Config:
        """Pydantic configuration"""
        frozen = True

    @classmethod
    def default(cls) -> "WardConfig":
        """Configuration used when the repository has no config file"""
        return cls(
            exclude=list(DEFAULT_EXCLUDE),
            skip_entropy_checks=list(DEFAULT_SKIP_ENTROPY_CHECKS),
            threshold=DEFAULT_THRESHOLD,
            rules=[],
        )

    def with_extra_excludes(self, patterns: List[str]) -> "WardConfig":
        """Return a copy with ``patterns`` appended to ``exclude``"""
        if not patterns:
            return self
        return WardConfig(
            exclude=list(self.exclude) + list(patterns),
            skip_entropy_checks=list(self.skip_entropy_checks),
            threshold=self.threshold,
            rules=list(self.rules),
        )


def find_config_file(root: Union[str, Path]) -> Optional[Path]:
    """Return the first config file present under ``root``"""
    root_path = Path(root)
    for name in CONFIG_FILENAMES:
        candidate = root_path / name
        if candidate.is_file():
            return candidate
    return None


def load_config_file(file_path: Union[str, Path]) -> WardConfig:
    """Load and validate a single YAML config file"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {file_path}: {e}") from e

    # An empty document is a config with every key omitted
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config format in {file_path}: expected a mapping")

    try:
        return WardConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {file_path}: {e}") from e


def load_ignore_file(file_path: Union[str, Path]) -> List[str]:
    """Read exclusion lines from an ignore file, skipping blanks and comments"""
    path = Path(file_path)
    if not path.is_file():
        return []

    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {file_path}: {e}") from e

    patterns = []
    for line in text.splitlines():
        stripped = line.rstrip()
        if not stripped.strip() or stripped.lstrip().startswith('#'):
            continue
        patterns.append(stripped)
    return patterns


def load_config(root: Union[str, Path] = ".") -> WardConfig:
    """Resolve the configuration for the repository at ``root``"""
    root_path = Path(root)
    config_file = find_config_file(root_path)

    if config_file is None:
        logger.debug("No config file found under %s, using defaults", root_path)
        if (root_path / LEGACY_CONFIG_FILENAME).is_file():
            logger.warning(
                "Ignoring %s: settings are read from %s, convert it to YAML",
                LEGACY_CONFIG_FILENAME, " or ".join(CONFIG_FILENAMES)
            )
        config = WardConfig.default()
    else:
        logger.debug("Loading config from %s", config_file)
        config = load_config_file(config_file)

    ignore_patterns = load_ignore_file(root_path / IGNORE_FILENAME)
    if ignore_patterns:
        logger.debug("Loaded %d patterns from %s", len(ignore_patterns), IGNORE_FILENAME)

    return config.with_extra_excludes(ignore_patterns)
