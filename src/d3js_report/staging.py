"""Copies bundled viewer resources next to exported rule data."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Optional

from .exceptions import ResourceNotFoundError, StagingError
from .file_ops import atomic_write_bytes
from .models import LIB_DIRECTORY
from .resources import PackageResourceProvider, ResourceProvider

logger = logging.getLogger(__name__)

LIB_PREFIX = LIB_DIRECTORY
ENTRY_FILE = "diagram.html"


class ResourceStager:
    """Stages the shared ``lib/`` tree and one diagram tree into an output root.

    Resulting layout::

        <output_root>/lib/...
        <output_root>/<rule_dir>/diagram.html
    """

    def __init__(self, provider: Optional[ResourceProvider] = None) -> None:
        self.provider = provider if provider is not None else PackageResourceProvider()

    def stage(
        self,
        diagram_type: str,
        output_root: Path,
        rule_dir: str,
        rule_id: Optional[str] = None,
    ) -> str:
        """Copy the viewer for *diagram_type* and return the URI of its entry file.

        Raises:
            ResourceNotFoundError: If no viewer is bundled for *diagram_type*
            StagingError: If the copy fails
        """
        self._check_diagram_type(diagram_type, rule_id)

        output_root = Path(output_root)
        self._copy(LIB_PREFIX, output_root / LIB_PREFIX, rule_id)
        diagram_dir = output_root / rule_dir
        self._copy(diagram_type, diagram_dir, rule_id)

        entry = (diagram_dir / ENTRY_FILE).resolve()
        logger.debug("Staged %s diagram for rule %s at %s", diagram_type, rule_id, entry)
        return entry.as_uri()

    def _check_diagram_type(self, diagram_type: str, rule_id: Optional[str]) -> None:
        parts = PurePosixPath(diagram_type).parts
        if (
            len(parts) != 1
            or parts[0] in (".", "..", LIB_PREFIX)
            or "\\" in diagram_type
            or not self.provider.has_prefix(diagram_type)
        ):
            raise ResourceNotFoundError(diagram_type, rule_id=rule_id)
        if not self.provider.has_entry(diagram_type, ENTRY_FILE):
            raise ResourceNotFoundError(diagram_type, rule_id=rule_id)

    def _copy(self, prefix: str, target: Path, rule_id: Optional[str]) -> None:
        try:
            target.mkdir(parents=True, exist_ok=True)
            for relative, content in self.provider.list_entries(prefix):
                atomic_write_bytes(target.joinpath(*PurePosixPath(relative).parts), content)
        except OSError as e:
            raise StagingError(target, rule_id=rule_id, cause=e) from e
