"""
Data models for signature patterns, findings, and scan results
"""

import re
from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum


class Severity(str, Enum):
    """Finding severity levels"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SignaturePattern(BaseModel):
    """A labelled regex evaluated against single lines of text"""
    label: str = Field(..., description="Human-readable rule name")
    regex: re.Pattern = Field(..., description="Compiled line matcher")
    severity: Severity = Field(default=Severity.HIGH, description="Severity of a match")
    verify_mnemonic: bool = Field(
        default=False,
        description="Matches are seed-phrase candidates that need vocabulary verification"
    )

    class Config:
        """Pydantic configuration"""
        frozen = True
        arbitrary_types_allowed = True


class Finding(BaseModel):
    """One suspected secret at a specific file and line"""
    file_path: str = Field(..., description="Repository-relative file path")
    line: int = Field(..., ge=1, description="Line number (1-based)")
    rule: str = Field(..., description="Label of the rule that fired")
    snippet: str = Field(..., description="Truncated excerpt of the offending text")
    severity: Severity = Field(default=Severity.HIGH, description="Severity level")

    class Config:
        """Pydantic configuration"""
        frozen = True


class ScanResult(BaseModel):
    """Results from scanning one file"""
    file_path: str = Field(..., description="Scanned file path")
    findings: List[Finding] = Field(default_factory=list, description="Findings in line order")
    scan_time_ms: float = Field(default=0.0, description="Scan duration in milliseconds")
    rules_applied: int = Field(default=0, description="Number of signature rules applied")
    errors: Optional[List[str]] = Field(None, description="Scan errors")

    @property
    def finding_count(self) -> int:
        """Total number of findings"""
        return len(self.findings)
