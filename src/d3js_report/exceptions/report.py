"""Rule-scoped report failures: data export, resource lookup, staging."""

from pathlib import Path
from typing import Optional

from .base import D3JSReportError


class ReportError(D3JSReportError):
    """Base class for failures while producing the report of one rule."""

    def __init__(
        self,
        message: str,
        rule_id: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **details: str,
    ):
        if rule_id is not None:
            details["rule"] = rule_id
        if cause is not None:
            details["reason"] = str(cause)
        super().__init__(message, details=details)
        self.rule_id = rule_id
        self.cause = cause


class ExportError(ReportError):
    """Raised when the data file of a rule cannot be written."""

    def __init__(self, path: Path, rule_id: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(f"Cannot write data to {path}", rule_id=rule_id, cause=cause, path=str(path))
        self.path = path


class StagingError(ReportError):
    """Raised when bundled viewer resources cannot be copied."""

    def __init__(self, path: Path, rule_id: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(
            f"Cannot stage diagram resources to {path}", rule_id=rule_id, cause=cause, path=str(path)
        )
        self.path = path


class ResourceNotFoundError(ReportError):
    """Raised when no bundled viewer exists for a diagram type."""

    def __init__(self, diagram_type: str, rule_id: Optional[str] = None):
        super().__init__(
            f"No diagram resources bundled for type '{diagram_type}'",
            rule_id=rule_id,
            diagram_type=diagram_type,
        )
        self.diagram_type = diagram_type
