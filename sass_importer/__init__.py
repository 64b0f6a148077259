"""Stylesheet import resolution following filesystem importer rules.

Resolves ``@use`` and ``@import`` specifiers to files on disk, handling
partials, the ``.sass``/``.scss``/``.css`` extensions, import-only files and
directory index files.
"""

from .errors import AmbiguousImportError
from .importer import FilesystemImporter
from .importer import LoadPathResolver
from .logging_setup import init_json_logging
from .mode import in_use_rule
from .mode import in_use_rule_async
from .mode import is_in_use_rule
from .mode import use_rule_scope
from .models import ResolutionResult
from .models import ResolutionStatus
from .resolver import resolve_import
from .resolver import resolve_import_path
from .settings import SettingsManager
from .ui import display_ambiguous_import_error

__all__ = [
    "AmbiguousImportError",
    "FilesystemImporter",
    "LoadPathResolver",
    "ResolutionResult",
    "ResolutionStatus",
    "SettingsManager",
    "display_ambiguous_import_error",
    "in_use_rule",
    "in_use_rule_async",
    "init_json_logging",
    "is_in_use_rule",
    "resolve_import",
    "resolve_import_path",
    "use_rule_scope",
]
