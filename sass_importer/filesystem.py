"""Filesystem queries used by the resolver.

These are the only functions that look at the disk. Errors raised by the OS
propagate to the caller.
"""

import os


def file_exists(path: str) -> bool:
    """Whether ``path`` exists and is a regular file."""
    return os.path.isfile(path)


def dir_exists(path: str) -> bool:
    """Whether ``path`` exists and is a directory."""
    return os.path.isdir(path)
