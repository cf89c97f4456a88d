"""CSV exporters for rule results."""

import csv
import io

from .base import BaseExporter
from ..models import DataFormat, Result


class CsvExporter(BaseExporter):
    """Header line of column names, then one comma-joined line per row.

    Values are written with ``str()`` and are not quoted, so a value holding
    a comma or a line break shifts the columns of its row.
    """

    data_format = DataFormat.CSV

    def format(self, result: Result) -> str:
        lines = [",".join(result.column_names)]
        for row in result.rows:
            lines.append(",".join(str(value) for value in result.row_values(row)))
        return "".join(line + "\n" for line in lines)


class QuotedCsvExporter(BaseExporter):
    """RFC 4180 CSV with quoting where needed."""

    data_format = DataFormat.CSV

    def format(self, result: Result) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(result.column_names)
        for row in result.rows:
            writer.writerow([str(value) for value in result.row_values(row)])
        return output.getvalue()
