"""Path helpers used by import resolution.

All helpers are pure string transforms following ``os.path`` conventions.
None of them touch the filesystem.
"""

import os

PARTIAL_PREFIX = "_"


def extension(path: str) -> str:
    """Return the last dotted suffix of the basename (e.g. ``.scss``).

    A basename that only starts with a dot (``.scss``) has no extension.
    """
    return os.path.splitext(path)[1]


def without_extension(path: str) -> str:
    """Return ``path`` with its last dotted suffix removed."""
    return os.path.splitext(path)[0]


def partial_path(path: str) -> str:
    """Return the partial sibling of ``path``.

    The prefix is applied to the basename only: ``a/b/c.scss`` -> ``a/b/_c.scss``.
    """
    return os.path.join(os.path.dirname(path), PARTIAL_PREFIX + os.path.basename(path))


def is_partial(path: str) -> bool:
    return os.path.basename(path).startswith(PARTIAL_PREFIX)


def pretty_uri(path: str) -> str:
    """Render a path for humans.

    Relative paths are normalized. Absolute paths are shown relative to the
    current directory, unless the relative form needs more components than the
    absolute one (deep ``../`` chains), in which case the absolute path is kept.
    The root of an absolute path counts as one component.
    """
    if not os.path.isabs(path):
        return os.path.normpath(path)

    try:
        relative = os.path.relpath(path)
    except ValueError:
        # Different drive on Windows
        return path

    if _component_count(relative) > _component_count(path):
        return path
    return relative


def _component_count(path: str) -> int:
    _, rest = os.path.splitdrive(path)
    parts = [part for part in rest.replace(os.sep, "/").split("/") if part]
    root = 1 if os.path.isabs(path) else 0
    return root + len(parts)
