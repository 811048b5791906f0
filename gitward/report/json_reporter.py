"""
JSON reporter for machine-readable output
"""

import json
from datetime import datetime, timezone
from typing import List, Dict, Any

from .. import __version__
from ..rules.models import ScanResult, Severity
from .console import mask_snippet


class JSONReporter:
    """JSON output formatter for scan results"""

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    def export_results(self, results: List[ScanResult], output_file: str) -> None:
        """Export scan results to a JSON file"""
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(self.format_results_string(results))

    def format_results_string(self, results: List[ScanResult]) -> str:
        """Format scan results as a JSON string"""
        output_data = self._format_results(results)

        if self.pretty:
            return json.dumps(output_data, indent=2)
        else:
            return json.dumps(output_data)

    def _format_results(self, results: List[ScanResult]) -> Dict[str, Any]:
        """Format scan results into JSON structure"""
        total_findings = sum(len(result.findings) for result in results)
        severity_counts = {severity.value: 0 for severity in Severity}

        for result in results:
            for finding in result.findings:
                severity_counts[finding.severity.value] += 1

        output_data = {
            "scan_info": {
                "tool": "gitward",
                "version": __version__,
                "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
                "files_scanned": len(results),
                "total_findings": total_findings
            },
            "summary": {
                "findings_by_severity": severity_counts,
                "blocked": total_findings > 0
            },
            "results": []
        }

        for result in results:
            result_data = {
                "file": result.file_path,
                "finding_count": result.finding_count,
                "scan_time_ms": result.scan_time_ms,
                "rules_applied": result.rules_applied,
                "findings": [
                    {
                        "rule": finding.rule,
                        "severity": finding.severity.value,
                        "line": finding.line,
                        "snippet": mask_snippet(finding.snippet)
                    }
                    for finding in result.findings
                ]
            }

            if result.errors:
                result_data["errors"] = result.errors

            output_data["results"].append(result_data)

        return output_data
