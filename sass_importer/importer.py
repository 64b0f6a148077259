"""Filesystem importers built on :func:`resolve_import_path`.

- FilesystemImporter: resolves URLs relative to a single load path
- LoadPathResolver: tries the importing file's directory, then each load path
"""

import logging
import os
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from .resolver import resolve_import_path
from .settings import SettingsManager

logger = logging.getLogger(__name__)


class FilesystemImporter:
    """Loads stylesheets from a directory on disk."""

    def __init__(self, load_path: str | Path):
        """Initialize importer.

        Args:
            load_path: Directory that relative URLs are resolved against
        """
        self.load_path = os.path.abspath(os.fspath(load_path))

    def canonicalize(self, url: str) -> str | None:
        """Resolve ``url`` to an absolute, normalized file path.

        Accepts bare paths and ``file:`` URLs. Other URL schemes are not
        handled by this importer and yield None.

        Returns:
            Absolute path of the matching file, or None if nothing matches

        Raises:
            AmbiguousImportError: More than one file matches
        """
        path = _url_to_path(url)
        if path is None:
            logger.debug(f"[import:canonicalize] {url} -> unsupported scheme")
            return None

        resolved = resolve_import_path(os.path.join(self.load_path, path))
        if resolved is None:
            return None
        return os.path.normpath(os.path.abspath(resolved))

    def __repr__(self) -> str:
        return f"FilesystemImporter({self.load_path})"


class LoadPathResolver:
    """Resolves imports against the importing file, then configured load paths.

    Resolution order (first match wins):
    1. Directory of the importing stylesheet (base_path), when given
    2. Each load path, in configured order

    Ambiguity in an earlier location is raised immediately; later locations
    are not consulted.
    """

    def __init__(self, load_paths: list[str | Path] | None = None):
        self.importers = [FilesystemImporter(p) for p in load_paths or []]

    @classmethod
    def from_settings(cls, settings: SettingsManager | None = None) -> "LoadPathResolver":
        """Build a resolver from the merged ``load_paths`` setting."""
        settings = settings or SettingsManager()
        return cls(settings.get_load_paths())

    def resolve(self, url: str, base_path: str | Path | None = None) -> str | None:
        """Resolve ``url`` to an absolute path.

        Args:
            url: Import URL as written in the stylesheet
            base_path: Path of the stylesheet containing the import

        Returns:
            Absolute path of the matching file, or None if nothing matches
        """
        importers = list(self.importers)
        if base_path is not None:
            importers.insert(0, FilesystemImporter(os.path.dirname(os.path.abspath(os.fspath(base_path)))))

        for importer in importers:
            resolved = importer.canonicalize(url)
            if resolved is not None:
                logger.debug(f"[import:load-path] {url} -> {resolved} (via {importer.load_path})")
                return resolved

        logger.debug(f"[import:load-path] {url} not found in {len(importers)} location(s)")
        return None


def _url_to_path(url: str) -> str | None:
    """Convert an import URL to a filesystem path, or None for non-file schemes."""
    parsed = urlparse(url)
    if parsed.scheme == "file":
        # A non-local host names a UNC share: file://host/share/x -> //host/share/x
        if parsed.netloc and parsed.netloc != "localhost":
            return url2pathname(f"//{parsed.netloc}{parsed.path}")
        return url2pathname(parsed.path)
    # Single-letter schemes are Windows drive letters, not URL schemes
    if parsed.scheme and len(parsed.scheme) > 1:
        return None
    return url
