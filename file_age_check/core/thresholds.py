"""Threshold parsing and evaluation.

Age and size alert in opposite directions: a file is stale once its age
reaches a bound, and undersized while its size is below a floor.
"""

import re
from typing import Union

from .exceptions import ThresholdParseError
from .models import Severity, Threshold

TIME_UNITS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
    "w": 60 * 60 * 24 * 7,
}

SIZE_UNITS = {
    "k": 1024,
    "M": 1024 * 1024,
    "G": 1024 * 1024 * 1024,
}

_TIME_RE = re.compile(r"([0-9]+)([smhdw]?)")
_SIZE_RE = re.compile(r"([0-9]+)([kMG]?)")


def parse_time(value: Union[str, int], description: str = "time") -> int:
    """Convert an age such as ``90``, ``15m`` or ``2d`` to seconds.

    Raises:
        ThresholdParseError: If the value is not digits with an optional
            s, m, h, d or w suffix.
    """
    match = _TIME_RE.fullmatch(str(value))
    if not match:
        raise ThresholdParseError(str(value), description)
    digits, unit = match.groups()
    return int(digits) * TIME_UNITS[unit or "s"]


def parse_size(value: Union[str, int], description: str = "size") -> int:
    """Convert a size such as ``512``, ``4k`` or ``1G`` to bytes.

    Raises:
        ThresholdParseError: If the value is not digits with an optional
            k, M or G suffix.
    """
    match = _SIZE_RE.fullmatch(str(value))
    if not match:
        raise ThresholdParseError(str(value), description)
    digits, unit = match.groups()
    return int(digits) * SIZE_UNITS.get(unit, 1)


def age_breaches(age: float, bound: int) -> bool:
    """Staleness rule: alert once the age reaches the bound."""
    return age >= bound


def size_breaches(size: int, floor: int) -> bool:
    """Undersize rule: alert while the size is below the floor."""
    return size < floor


def age_severity(age: float, threshold: Threshold) -> Severity:
    if age_breaches(age, threshold.critical):
        return Severity.CRITICAL
    if age_breaches(age, threshold.warning):
        return Severity.WARNING
    return Severity.OK


def size_severity(size: int, threshold: Threshold) -> Severity:
    if size_breaches(size, threshold.critical):
        return Severity.CRITICAL
    if size_breaches(size, threshold.warning):
        return Severity.WARNING
    return Severity.OK


def evaluate(age: float, size: int, age_threshold: Threshold, size_threshold: Threshold) -> Severity:
    """Combine both dimensions into the most severe state."""
    return max(age_severity(age, age_threshold), size_severity(size, size_threshold))
