"""Rich display helpers for resolution errors."""

from .error_display import display_ambiguous_import_error

__all__ = ["display_ambiguous_import_error"]
