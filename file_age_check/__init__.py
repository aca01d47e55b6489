"""
File Age Check - A monitoring plugin for the freshness of dated files.

This package finds the latest file matching a pattern in a date-templated
directory and rates its age and size against warning and critical thresholds.
"""

__version__ = "1.0.2"

from .core.monitor import FileAgeCheck
from .core.resolver import DirectoryResolver
from .core.scanner import DirectoryScanner

__all__ = ["FileAgeCheck", "DirectoryResolver", "DirectoryScanner"]
