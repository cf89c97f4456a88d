"""
d3js-report - D3.js diagram reports for rule results

A report plugin for analysis hosts: each rule result is exported as CSV or
JSON and a static D3.js viewer is staged next to it, ready to open from a
local file:// URL.
"""

__version__ = "1.0.0"

from .context import ReportRegistry
from .exceptions import (
    ConfigurationError,
    D3JSReportError,
    ExportError,
    ResourceNotFoundError,
    StagingError,
)
from .models import DataFormat, ReportArtifact, ReportType, Result, Rule
from .plugin import D3JSReportPlugin

__all__ = [
    "D3JSReportPlugin",  # Main entry point
    "ReportRegistry",
    "Rule",
    "Result",
    "DataFormat",
    "ReportType",
    "ReportArtifact",
    "D3JSReportError",
    "ConfigurationError",
    "ExportError",
    "ResourceNotFoundError",
    "StagingError",
]
