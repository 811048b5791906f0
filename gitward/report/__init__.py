"""
Reporting and output formatting
"""

from .console import ConsoleReporter, mask_snippet
from .json_reporter import JSONReporter

__all__ = ["ConsoleReporter", "JSONReporter", "mask_snippet"]
