"""Configuration exceptions: report properties, settings files, rule ids."""

from typing import Any, Dict, Optional

from .base import D3JSReportError


class ConfigurationError(D3JSReportError):
    """Raised when a rule or the plugin is misconfigured."""

    def __init__(
        self,
        message: str,
        rule_id: Optional[str] = None,
        details: Optional[Dict[str, str]] = None,
    ):
        details = dict(details or {})
        if rule_id is not None:
            details.setdefault("rule", rule_id)
        super().__init__(message, details=details)
        self.rule_id = rule_id


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str, rule_id: Optional[str] = None):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            rule_id=rule_id,
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
