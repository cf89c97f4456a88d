"""JSON exporters for rule results."""

import json

from .base import BaseExporter
from ..models import DataFormat, Result


def _render(value) -> str:
    return "null" if value is None else str(value)


class JsonExporter(BaseExporter):
    """Array of row objects in the viewer's historical notation.

    Keys and values are emitted unquoted, missing cells as ``null``, and
    every object is followed by a comma, so the output is JavaScript-like
    text rather than valid JSON::

        [
          {
            source: a,
            target: b  },
        ]
    """

    data_format = DataFormat.JSON

    def format(self, result: Result) -> str:
        parts = ["[\n"]
        for row in result.rows:
            parts.append("  {\n")
            parts.append(
                ",\n".join(
                    f"    {column}: {_render(value)}"
                    for column, value in zip(result.column_names, result.row_values(row))
                )
            )
            parts.append("  },\n")
        parts.append("]")
        return "".join(parts)


class StrictJsonExporter(BaseExporter):
    """Valid JSON array of objects with stringified cell values."""

    data_format = DataFormat.JSON

    def format(self, result: Result) -> str:
        data = [
            {column: str(value) for column, value in zip(result.column_names, result.row_values(row))}
            for row in result.rows
        ]
        return json.dumps(data, indent=2)
