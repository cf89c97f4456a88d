"""Base exception for d3js-report.

Errors raised while reporting a rule carry the rule id, and usually the
affected path or diagram type, in ``details`` so a host can log one line
per failed rule.
"""

from typing import Dict, Optional


class D3JSReportError(Exception):
    """Base exception for all d3js-report errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({', '.join(f'{k}={v}' for k, v in self.details.items())})"
