"""Report plugin driven by the host: configure once, then one call per rule result.

Per rule the plugin writes ``data.csv`` or ``data.json`` into
``<output_root>/<sanitized rule id>/``, stages the bundled viewer for the
rule's ``diagram-type`` next to it and registers a link to the staged
``diagram.html``.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import ReportConfig, config_fields, load_config
from .exceptions import ConfigurationError
from .exporters import export_data
from .logging_config import setup_logging
from .models import (
    DATA_FORMAT_PROPERTY,
    DIAGRAM_TYPE_PROPERTY,
    DataFormat,
    ReportContext,
    ReportType,
    Result,
    Rule,
    sanitize_rule_id,
)
from .resources import ResourceProvider
from .staging import ResourceStager

logger = logging.getLogger(__name__)


class PluginState(Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    PROCESSED = "processed"


class D3JSReportPlugin:
    """Exports rule results and stages D3.js diagram viewers for them.

    Usage::

        registry = ReportRegistry()
        plugin = D3JSReportPlugin(registry)
        plugin.configure("/path/to/report/d3js")
        plugin.process_result(rule, result)
        registry.artifacts  # -> [ReportArtifact(label="D3JS my_rule chord-Diagram", ...)]

    Invocations are independent: each one writes only below its rule's
    directory and the shared ``lib/`` tree.
    """

    def __init__(self, report_context: ReportContext, provider: Optional[ResourceProvider] = None) -> None:
        self.report_context = report_context
        self.stager = ResourceStager(provider)
        self.state = PluginState.UNCONFIGURED
        self.config: Optional[ReportConfig] = None
        self.output_root: Optional[Path] = None

    def configure(
        self,
        output_root: Union[str, Path],
        options: Optional[Mapping[str, Any]] = None,
        config_file: Optional[Path] = None,
    ) -> None:
        """Set the output root and merge host options over the loaded configuration.

        Option keys may be spelled with ``-`` or ``_``; keys that are not
        configuration fields are ignored.
        """
        known = config_fields()
        overrides: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = str(key).replace("-", "_")
            if name in known:
                overrides[name] = value
            else:
                logger.debug("Ignoring unknown plugin option %r", key)

        self.config = load_config(config_file=config_file, **overrides)
        if self.config.wants_logging:
            setup_logging(
                verbose=self.config.verbosity == "verbose",
                quiet=self.config.verbosity == "quiet",
                log_file=self.config.log_file,
            )

        self.output_root = Path(output_root).resolve()
        self.state = PluginState.CONFIGURED
        logger.info("d3js report output root: %s", self.output_root)

    def set_result(self, result: Result) -> None:
        """Host contract entry point; the rule is taken from the result."""
        self.process_result(result.rule, result)

    def process_result(self, rule: Rule, result: Result) -> None:
        """Export, stage and register the report of one rule.

        Raises:
            ConfigurationError: If the plugin is unconfigured or the rule lacks
                a valid ``diagram-type`` / ``data-format``
            ExportError: If the data file cannot be written
            ResourceNotFoundError: If no viewer is bundled for the diagram type
            StagingError: If viewer resources cannot be copied
        """
        if self.state is PluginState.UNCONFIGURED or self.output_root is None or self.config is None:
            raise ConfigurationError("Plugin has not been configured", rule_id=rule.id)

        rule_id = rule.id
        rule_name = sanitize_rule_id(rule_id)
        properties = rule.report_properties or {}

        diagram_type = properties.get(DIAGRAM_TYPE_PROPERTY)
        if diagram_type is None or not str(diagram_type).strip():
            raise ConfigurationError(f"Diagram type not specified for rule {rule_id}", rule_id=rule_id)
        diagram_type = str(diagram_type).strip()
        data_format = DataFormat.parse(properties.get(DATA_FORMAT_PROPERTY), rule_id)

        rule_dir = self.output_root / rule_name
        export_data(
            result,
            rule_id,
            data_format,
            rule_dir,
            style=self.config.output_style,
            encoding=self.config.encoding,
        )

        label = f"D3JS {rule_name} {diagram_type}-Diagram"
        html_url = self.stager.stage(diagram_type, self.output_root, rule_name, rule_id=rule_id)
        self.report_context.add_report(label, rule, ReportType.LINK, html_url)

        image_url = self.export_as_image(rule, diagram_type)
        if image_url is not None:
            self.report_context.add_report(label, rule, ReportType.IMAGE, image_url)
        else:
            logger.debug("No image rendered for rule %s", rule_id)

        self.state = PluginState.PROCESSED
        logger.info("Created %s report for rule %s: %s", diagram_type, rule_id, html_url)

    def export_as_image(self, rule: Rule, diagram_type: str) -> Optional[str]:
        """Render a static image of the diagram.

        Not implemented: always returns ``None`` and no image artifact is
        registered.
        """
        return None
