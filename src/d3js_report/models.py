"""Data models shared between the host contract, exporters and the stager."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Protocol, Sequence

from .exceptions import ConfigurationError, InvalidConfigError

DIAGRAM_TYPE_PROPERTY = "diagram-type"
DATA_FORMAT_PROPERTY = "data-format"

# Shared viewer assets live in <output_root>/lib/
LIB_DIRECTORY = "lib"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


@dataclass(frozen=True)
class Rule:
    """A host-defined analysis rule and its report properties."""

    id: str
    report_properties: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""


@dataclass(frozen=True)
class Result:
    """Tabular result of evaluating one rule.

    Rows map column names to arbitrary values; values are rendered with
    ``str()`` by every exporter.
    """

    rule: Rule
    column_names: Sequence[str]
    rows: Sequence[Mapping[str, Any]] = ()

    def row_values(self, row: Mapping[str, Any]) -> Iterator[Any]:
        """Yield the values of *row* in column order."""
        for column in self.column_names:
            yield row.get(column)


class DataFormat(Enum):
    """Encodings available for the exported data file."""

    CSV = ".csv"
    JSON = ".json"

    @property
    def file_suffix(self) -> str:
        return self.value

    @property
    def file_name(self) -> str:
        return "data" + self.value

    @classmethod
    def parse(cls, value: Optional[str], rule_id: str) -> "DataFormat":
        """Resolve a ``data-format`` property value, case-insensitively.

        Raises:
            ConfigurationError: If the value is missing or not a known format
        """
        if value is None or not str(value).strip():
            raise ConfigurationError(f"Data export format not specified for rule {rule_id}", rule_id=rule_id)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ConfigurationError(
                f"Illegal data export format {value} for rule {rule_id}",
                rule_id=rule_id,
                details={"supported": ", ".join(f.name.lower() for f in cls)},
            ) from None


class ReportType(Enum):
    """Kinds of artifacts registered with the host."""

    LINK = "link"
    IMAGE = "image"


@dataclass(frozen=True)
class ReportArtifact:
    label: str
    rule: Rule
    report_type: ReportType
    url: Optional[str]


class ReportContext(Protocol):
    """Registry the host exposes for produced report artifacts."""

    def add_report(self, label: str, rule: Rule, report_type: ReportType, url: Optional[str]) -> None: ...


def sanitize_rule_id(rule_id: str) -> str:
    """Map a rule id to a directory name.

    Every character outside ``[A-Za-z0-9._-]`` becomes ``_``, so
    ``"my:rule"`` maps to ``"my_rule"``. Two ids differing only in such
    characters share a directory. ``lib`` (in any case) is reserved for the
    shared viewer assets.

    Raises:
        InvalidConfigError: If the id would resolve to the output root, its parent or lib/
    """
    sanitized = _UNSAFE_CHARS.sub("_", rule_id)
    if not sanitized.strip("."):
        raise InvalidConfigError("rule id", rule_id, "does not map to a usable directory name", rule_id=rule_id)
    if sanitized.lower() == LIB_DIRECTORY:
        raise InvalidConfigError("rule id", rule_id, "maps to the shared lib directory", rule_id=rule_id)
    return sanitized
