"""Configuration loading and management for d3js-report.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.d3js-report.toml)
    3. Project config (./d3js-report.toml)
    4. Explicit config file
    5. Environment variables (D3JS_REPORT_* prefix)
    6. Overrides (typically the host's plugin properties)

Example:
    >>> config = load_config(output_style="standard")
    >>> config.output_style
    'standard'
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
OutputStyle = Literal["legacy", "standard"]
Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "D3JS_REPORT_"
GLOBAL_CONFIG_NAME = ".d3js-report.toml"
PROJECT_CONFIG_NAME = "d3js-report.toml"

_OUTPUT_STYLES = ("legacy", "standard")
_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class ReportConfig:
    """Settings for exporting and staging rule reports.

    Attributes:
        output_style: ``legacy`` reproduces the historical unescaped CSV and
            unquoted pseudo-JSON byte for byte; ``standard`` writes quoted
            CSV and valid JSON.
        encoding: Text encoding of exported data files.
        verbosity: Logging verbosity level.
        log_file: Optional file receiving plugin logs.
    """

    output_style: OutputStyle = "legacy"
    encoding: str = "utf-8"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if self.output_style not in _OUTPUT_STYLES:
            raise InvalidConfigError(
                "output_style", self.output_style, f"expected one of {', '.join(_OUTPUT_STYLES)}"
            )
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError("verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITIES)}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding") from None

    @property
    def wants_logging(self) -> bool:
        """Whether the plugin should install its own log handlers."""
        return self.verbosity != "normal" or self.log_file is not None


def config_fields() -> set[str]:
    return {f.name for f in fields(ReportConfig)}


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically host plugin properties)

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value is invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update(overrides)

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from D3JS_REPORT_* environment variables.

    Supported environment variables:
        D3JS_REPORT_OUTPUT_STYLE: legacy/standard
        D3JS_REPORT_ENCODING: str
        D3JS_REPORT_VERBOSITY: quiet/normal/verbose
        D3JS_REPORT_LOG_FILE: path
    """
    type_hints = get_type_hints(ReportConfig)
    result: dict[str, Any] = {}

    for field_name in config_fields():
        env_value = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if env_value is None:
            continue
        if type_hints.get(field_name) is None:
            continue
        result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file, accepting either top-level keys or a ``[d3js-report]`` table."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    section = data.get("d3js-report", data)
    return {key.replace("-", "_"): value for key, value in section.items()}
