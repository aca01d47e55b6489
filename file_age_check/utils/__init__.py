"""Utility modules for the file age check."""

from .formatters import format_file_size, format_perfdata, format_status_line

__all__ = ["format_file_size", "format_perfdata", "format_status_line"]
