"""Resolves stylesheet import specifiers using filesystem importer rules.

Resolution order for a specifier ``path`` (first match wins):

With a ``.sass``, ``.scss`` or ``.css`` extension:
1. ``path`` with ``.import`` before the extension (``@import`` only)
2. ``path`` itself

Without a recognized extension:
1. ``path.import`` with each extension (``@import`` only)
2. ``path`` with each extension
3. ``path`` as a directory, via its ``index`` file

Every step also checks the partial (``_``-prefixed) sibling. If a step finds
more than one file, resolution fails with :class:`AmbiguousImportError` rather
than picking one.
"""

import logging
import os
from collections.abc import Callable
from typing import TypeVar

from . import filesystem
from .errors import AmbiguousImportError
from .mode import is_in_use_rule
from .models import ResolutionResult
from .paths import extension
from .paths import partial_path
from .paths import without_extension

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_EXTENSIONS = (".sass", ".scss", ".css")


def resolve_import_path(path: str | os.PathLike[str]) -> str | None:
    """Resolve an imported path the same way the filesystem importer does.

    Fills in extensions and partial prefixes, and falls back to a directory's
    index file.

    Args:
        path: Import specifier, with or without extension

    Returns:
        The matching file path, or None if no file matches

    Raises:
        AmbiguousImportError: More than one file matches
    """
    path = os.fspath(path)
    in_import = not is_in_use_rule()

    try:
        resolved = _resolve(path, in_import)
    except AmbiguousImportError as e:
        if e.specifier is None:
            e.specifier = path
        raise

    if resolved is None:
        logger.debug(f"[import:resolve] {path} -> not found")
    else:
        logger.debug(f"[import:resolve] {path} -> {resolved}")
    return resolved


def resolve_import(path: str | os.PathLike[str]) -> ResolutionResult:
    """Like :func:`resolve_import_path`, but reports ambiguity as a result."""
    specifier = os.fspath(path)
    try:
        resolved = resolve_import_path(specifier)
    except AmbiguousImportError as e:
        return ResolutionResult.ambiguous(specifier, e.paths)

    if resolved is None:
        return ResolutionResult.not_found(specifier)
    return ResolutionResult.found(specifier, resolved)


def _resolve(path: str, in_import: bool) -> str | None:
    ext = extension(path)
    if ext in SOURCE_EXTENSIONS:
        return _if_in_import(
            in_import, lambda: _exactly_one(_try_path(f"{without_extension(path)}.import{ext}"))
        ) or _exactly_one(_try_path(path))

    return (
        _if_in_import(in_import, lambda: _exactly_one(_try_path_with_extensions(f"{path}.import")))
        or _exactly_one(_try_path_with_extensions(path))
        or _try_path_as_directory(path, in_import)
    )


def _try_path_with_extensions(path: str) -> list[str]:
    """Like :func:`_try_path`, but checks ``.sass``, ``.scss`` and ``.css``.

    ``.sass`` and ``.scss`` matches are merged, so a file present with both
    extensions is ambiguous. ``.css`` is only checked when neither matches.
    """
    result = _try_path(path + ".sass") + _try_path(path + ".scss")
    return result if result else _try_path(path + ".css")


def _try_path(path: str) -> list[str]:
    """Return the partial for ``path`` and/or ``path`` itself, whichever exist."""
    partial = partial_path(path)
    candidates = []
    if filesystem.file_exists(partial):
        candidates.append(partial)
    if filesystem.file_exists(path):
        candidates.append(path)
    return candidates


def _try_path_as_directory(path: str, in_import: bool) -> str | None:
    """Return the index file for ``path`` if it is a directory that has one."""
    if not filesystem.dir_exists(path):
        return None

    return _if_in_import(
        in_import, lambda: _exactly_one(_try_path_with_extensions(os.path.join(path, "index.import")))
    ) or _exactly_one(_try_path_with_extensions(os.path.join(path, "index")))


def _exactly_one(paths: list[str]) -> str | None:
    """Return the only path in ``paths``, None if empty.

    Raises:
        AmbiguousImportError: ``paths`` has more than one entry
    """
    if not paths:
        return None
    if len(paths) == 1:
        return paths[0]

    logger.debug(f"[import:resolve] ambiguous candidates: {paths}")
    raise AmbiguousImportError(paths)


def _if_in_import(in_import: bool, callback: Callable[[], T | None]) -> T | None:
    return callback() if in_import else None
