"""Main file age check class."""

import logging
from datetime import datetime
from typing import Optional, Union

from .exceptions import ArgumentError, CheckError
from .models import EvaluationResult, FileInfo, PerfData, Severity, Threshold
from .resolver import DirectoryResolver
from .scanner import DirectoryScanner, compile_pattern
from .thresholds import evaluate, parse_size, parse_time
from ..utils.formatters import format_file_size

DEFAULT_WARN_AGE = "240"
DEFAULT_CRIT_AGE = "600"
DEFAULT_WARN_SIZE = "0"
DEFAULT_CRIT_SIZE = "0"


class FileAgeCheck:
    """Coordinates directory resolution, file selection and evaluation."""
    
    def __init__(self, directory: str, file_pattern: str,
                 warn_age: Union[str, int] = DEFAULT_WARN_AGE,
                 crit_age: Union[str, int] = DEFAULT_CRIT_AGE,
                 warn_size: Union[str, int] = DEFAULT_WARN_SIZE,
                 crit_size: Union[str, int] = DEFAULT_CRIT_SIZE,
                 resolver: Optional[DirectoryResolver] = None,
                 scanner: Optional[DirectoryScanner] = None):
        """Initialize file age check.
        
        Args:
            directory: Directory template, may contain date placeholders and wildcards.
            file_pattern: Regular expression the file's basename must fully match.
            warn_age: Warning age threshold string (seconds unless suffixed).
            crit_age: Critical age threshold string.
            warn_size: Warning size floor string (bytes unless suffixed).
            crit_size: Critical size floor string.
            resolver: Directory resolver, defaults to the standard lookback bounds.
            scanner: File scanner.
        """
        self.directory = directory
        self.file_pattern = file_pattern
        self.warn_age = warn_age
        self.crit_age = crit_age
        self.warn_size = warn_size
        self.crit_size = crit_size
        self.resolver = resolver or DirectoryResolver()
        self.scanner = scanner or DirectoryScanner()
        self.logger = logging.getLogger(__name__)
    
    def parse_thresholds(self):
        """Convert the four threshold strings.
        
        Returns:
            Tuple of (age Threshold in seconds, size Threshold in bytes).
            
        Raises:
            ThresholdParseError: Naming the first offending option.
        """
        age_threshold = Threshold(
            warning=parse_time(self.warn_age, "warn time"),
            critical=parse_time(self.crit_age, "critical time")
        )
        size_threshold = Threshold(
            warning=parse_size(self.warn_size, "warn size"),
            critical=parse_size(self.crit_size, "critical size")
        )
        return age_threshold, size_threshold
    
    def locate(self, now: datetime) -> FileInfo:
        """Resolve the directory and select the latest matching file."""
        if not self.directory:
            raise ArgumentError("No directory given")
        if not self.file_pattern:
            raise ArgumentError("No file pattern given")
        
        pattern = compile_pattern(self.file_pattern)
        directory = self.resolver.resolve(self.directory, now)
        return self.scanner.select_latest(directory, pattern)
    
    def run(self, now: Optional[datetime] = None) -> EvaluationResult:
        """Run the check once.
        
        Args:
            now: Reference time, defaults to the current local time.
            
        Returns:
            EvaluationResult; any CheckError yields an UNKNOWN result.
        """
        now = now or datetime.now()
        
        try:
            age_threshold, size_threshold = self.parse_thresholds()
            latest = self.locate(now)
        except CheckError as e:
            self.logger.error(f"Check could not be evaluated: {e}")
            return EvaluationResult(severity=Severity.UNKNOWN, message=str(e))
        
        # epoch seconds; naive local datetimes are an hour off across DST changes
        age = int(now.timestamp() - latest.mtime)
        severity = evaluate(age, latest.size, age_threshold, size_threshold)
        
        self.logger.info(f"{latest.path}: {age}s old, {format_file_size(latest.size)} -> {severity.name}")
        
        return EvaluationResult(
            severity=severity,
            message=f"{latest.path} is {age} seconds old and {latest.size} bytes",
            perfdata=[
                PerfData("age", age, "s", age_threshold.warning, age_threshold.critical),
                PerfData("size", latest.size, "B", size_threshold.warning, size_threshold.critical),
                PerfData("file", latest.path),
            ],
            file=latest,
            age=age
        )
