"""Errors raised by import resolution."""

from .paths import pretty_uri


class AmbiguousImportError(Exception):
    """More than one file matches an import at a point where exactly one is allowed.

    Attributes:
        paths: Conflicting paths in the order they were found (partial before
            plain, ``.sass`` before ``.scss`` before ``.css``).
        specifier: The import specifier being resolved, when known.
    """

    def __init__(self, paths: list[str], specifier: str | None = None):
        self.paths = list(paths)
        self.specifier = specifier
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        found = "\n".join(f"  {pretty_uri(path)}" for path in self.paths)
        return f"It's not clear which file to import. Found:\n{found}"
