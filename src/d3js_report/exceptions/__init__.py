"""Exception hierarchy for d3js-report."""

from .base import D3JSReportError
from .config import ConfigurationError, InvalidConfigError
from .report import ExportError, ReportError, ResourceNotFoundError, StagingError

__all__ = [
    "D3JSReportError",
    "ConfigurationError",
    "InvalidConfigError",
    "ReportError",
    "ExportError",
    "StagingError",
    "ResourceNotFoundError",
]
