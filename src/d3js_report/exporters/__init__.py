"""Data exporters for d3js-report.

``export_data`` is the single entry point used by the plugin: it picks the
exporter for a format and output style and writes ``data.csv`` or
``data.json`` into the rule's output directory.
"""

import logging
from pathlib import Path

from ..exceptions import ConfigurationError, ExportError
from ..file_ops import atomic_write_text
from ..models import DataFormat, Result
from .base import BaseExporter
from .csv_exporter import CsvExporter, QuotedCsvExporter
from .json_exporter import JsonExporter, StrictJsonExporter

logger = logging.getLogger(__name__)

EXPORTERS: dict[str, dict[DataFormat, type[BaseExporter]]] = {
    "legacy": {
        DataFormat.CSV: CsvExporter,
        DataFormat.JSON: JsonExporter,
    },
    "standard": {
        DataFormat.CSV: QuotedCsvExporter,
        DataFormat.JSON: StrictJsonExporter,
    },
}


def get_exporter(data_format: DataFormat, style: str = "legacy") -> BaseExporter:
    """Get an exporter instance for a format and output style.

    Raises:
        ValueError: If the style or format is not recognized
    """
    by_format = EXPORTERS.get(style)
    if by_format is None:
        raise ValueError(f"Unknown output style: {style!r}. Choose from: {', '.join(sorted(EXPORTERS))}")
    cls = by_format.get(data_format)
    if cls is None:
        raise ValueError(f"No {style} exporter for {data_format!r}")
    return cls()


def export_data(
    result: Result,
    rule_id: str,
    data_format: DataFormat,
    output_dir: Path,
    style: str = "legacy",
    encoding: str = "utf-8",
) -> Path:
    """Write the data file for one rule result.

    Args:
        result: Tabular rule result
        rule_id: Id of the rule, used in error messages
        data_format: Target encoding
        output_dir: The rule's output directory, created if missing
        style: ``legacy`` or ``standard`` output
        encoding: Text encoding of the written file

    Returns:
        Path of the written file

    Raises:
        ConfigurationError: If no exporter matches *data_format*
        ExportError: If the file cannot be written
    """
    if not isinstance(data_format, DataFormat):
        raise ConfigurationError(f"Illegal data export format {data_format} for rule {rule_id}", rule_id=rule_id)
    exporter = get_exporter(data_format, style)
    target = Path(output_dir) / exporter.file_name

    content = exporter.format(result)
    try:
        atomic_write_text(target, content, encoding=encoding)
    except (OSError, UnicodeEncodeError) as e:
        raise ExportError(target, rule_id=rule_id, cause=e) from e

    logger.debug("Exported %d rows of rule %s to %s", len(result.rows), rule_id, target)
    return target


__all__ = [
    "BaseExporter",
    "CsvExporter",
    "QuotedCsvExporter",
    "JsonExporter",
    "StrictJsonExporter",
    "EXPORTERS",
    "get_exporter",
    "export_data",
]
