"""Data models for file age checking."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import List, Optional, Union


class Severity(IntEnum):
    """Monitoring plugin states, valued as their exit codes."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class Granularity(Enum):
    """Calendar unit stepped through when searching for a directory."""
    NONE = "none"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def unit_name(self) -> str:
        return f"{self.value}s"


@dataclass
class FileInfo:
    """Information about a file."""
    path: str
    name: str
    size: int
    modified_time: datetime
    mtime: float


@dataclass
class Threshold:
    """Warning and critical bounds in a single unit (seconds or bytes)."""
    warning: int
    critical: int


@dataclass
class PerfData:
    """A single labelled performance data measurement."""
    label: str
    value: Union[int, str]
    uom: str = ""
    warning: Optional[int] = None
    critical: Optional[int] = None


@dataclass
class EvaluationResult:
    """Outcome of one check run."""
    severity: Severity
    message: str
    perfdata: List[PerfData] = field(default_factory=list)
    file: Optional[FileInfo] = None
    age: Optional[int] = None

    @property
    def exit_code(self) -> int:
        return int(self.severity)
