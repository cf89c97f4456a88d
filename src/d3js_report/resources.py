"""Read-only access to the bundled diagram viewers.

The stager never touches the filesystem layout of the bundle directly; it
asks a :class:`ResourceProvider` for the entries below a prefix. The bundle
shipped with the package lives next to this module in ``diagram/``.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterator, Protocol, Tuple, Union

_PKG_DIR = Path(__file__).parent
BUNDLE_DIR = _PKG_DIR / "diagram"

Entry = Tuple[str, bytes]


class ResourceProvider(Protocol):
    """Source of bundled files addressed by POSIX-style prefixes."""

    def has_prefix(self, prefix: str) -> bool: ...

    def has_entry(self, prefix: str, name: str) -> bool: ...

    def list_entries(self, prefix: str) -> Iterator[Entry]: ...


class DirectoryResourceProvider:
    """Serves resources from a directory tree on disk.

    Entries are yielded in sorted order with paths relative to the prefix,
    e.g. ``list_entries("chord")`` yields ``("diagram.html", b"...")``.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def _resolve(self, prefix: str) -> Path | None:
        parts = PurePosixPath(prefix.strip("/")).parts
        if not parts or any(part in ("..", ".") for part in parts):
            return None
        return self.root.joinpath(*parts)

    def has_prefix(self, prefix: str) -> bool:
        base = self._resolve(prefix)
        return base is not None and base.is_dir()

    def has_entry(self, prefix: str, name: str) -> bool:
        """Whether the file *name* (relative to *prefix*) exists, without reading it."""
        base = self._resolve(prefix)
        if base is None or not base.is_dir():
            return False
        parts = PurePosixPath(name).parts
        if not parts or any(part in ("..", ".") for part in parts):
            return False
        return base.joinpath(*parts).is_file()

    def list_entries(self, prefix: str) -> Iterator[Entry]:
        base = self._resolve(prefix)
        if base is None or not base.is_dir():
            return
        for path in sorted(base.rglob("*")):
            if path.is_file() and "__pycache__" not in path.parts:
                yield path.relative_to(base).as_posix(), path.read_bytes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.root)!r})"


class PackageResourceProvider(DirectoryResourceProvider):
    """Serves the viewers bundled with d3js-report."""

    def __init__(self) -> None:
        super().__init__(BUNDLE_DIR)
