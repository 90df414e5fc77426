"""Common utility functions and helpers for the capsulegen package."""

from capsulegen.utils.file import bundle_filename, ensure_directory_exists, sanitize_filename

__all__ = ["bundle_filename", "ensure_directory_exists", "sanitize_filename"]
