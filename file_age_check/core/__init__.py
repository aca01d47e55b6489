"""Core checking functionality."""

from .monitor import FileAgeCheck
from .resolver import DirectoryResolver
from .scanner import DirectoryScanner
from .models import EvaluationResult, FileInfo, Granularity, PerfData, Severity, Threshold

__all__ = [
    "FileAgeCheck", "DirectoryResolver", "DirectoryScanner",
    "EvaluationResult", "FileInfo", "Granularity", "PerfData", "Severity", "Threshold",
]
