"""Resolution of date-templated directory paths.

A directory template may carry the placeholders ``#YEAR#``, ``#MONTH#``,
``#DAY#`` (day of year) and ``#MDAY#`` (day of month). The finest placeholder
present decides how far back the resolver steps: days win over months, months
over years. All placeholders are rendered from the same candidate date.
"""

import glob
import logging
import os
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

from .exceptions import DirectoryNotFoundError
from .models import Granularity

PLACEHOLDERS = [
    ("#YEAR#", "%Y"),
    ("#MONTH#", "%m"),
    ("#DAY#", "%j"),
    ("#MDAY#", "%d"),
]

DEFAULT_MAX_DAYS_BACK = 366
DEFAULT_MAX_MONTHS_BACK = 12
DEFAULT_MAX_YEARS_BACK = 10


def detect_granularity(template: str) -> Granularity:
    """Return the finest granularity named by the template's placeholders."""
    if "#DAY#" in template or "#MDAY#" in template:
        return Granularity.DAY
    if "#MONTH#" in template:
        return Granularity.MONTH
    if "#YEAR#" in template:
        return Granularity.YEAR
    return Granularity.NONE


def to_date_format(template: str) -> str:
    """Translate placeholders into strftime fields, escaping any literal ``%``."""
    date_format = template.replace("%", "%%")
    for placeholder, directive in PLACEHOLDERS:
        date_format = date_format.replace(placeholder, directive)
    return date_format


def candidate_date(today: date, granularity: Granularity, step: int) -> date:
    """Date ``step`` units of ``granularity`` before ``today``.

    Month steps land on the first of the month. Year steps keep the day of
    year, so day 366 of a leap year rolls into the next January in a common
    year.
    """
    if granularity is Granularity.DAY:
        return today - timedelta(days=step)
    if granularity is Granularity.MONTH:
        year, month_index = divmod(today.year * 12 + today.month - 1 - step, 12)
        return date(year, month_index + 1, 1)
    if granularity is Granularity.YEAR:
        day_of_year = today.timetuple().tm_yday
        return date(today.year - step, 1, 1) + timedelta(days=day_of_year - 1)
    return today


class DirectoryResolver:
    """Finds the newest non-empty directory matching a date template."""

    def __init__(self, max_days_back: int = DEFAULT_MAX_DAYS_BACK,
                 max_months_back: int = DEFAULT_MAX_MONTHS_BACK,
                 max_years_back: int = DEFAULT_MAX_YEARS_BACK):
        """Initialize directory resolver.

        Args:
            max_days_back: Days to step back for ``#DAY#``/``#MDAY#`` templates.
            max_months_back: Months to step back for ``#MONTH#`` templates.
            max_years_back: Years to step back for ``#YEAR#`` templates.
        """
        self.max_days_back = max_days_back
        self.max_months_back = max_months_back
        self.max_years_back = max_years_back
        self.logger = logging.getLogger(__name__)

    def lookback_bound(self, granularity: Granularity) -> int:
        """Number of backward steps allowed for a granularity."""
        return {
            Granularity.DAY: self.max_days_back,
            Granularity.MONTH: self.max_months_back,
            Granularity.YEAR: self.max_years_back,
        }.get(granularity, 0)

    def candidate_paths(self, template: str, now: datetime) -> List[Tuple[int, str]]:
        """Rendered paths in search order, newest first.

        Args:
            template: Directory template.
            now: Reference time the search steps back from.

        Returns:
            List of (step, path) pairs.
        """
        granularity = detect_granularity(template)
        bound = self.lookback_bound(granularity)
        date_format = to_date_format(template)
        today = now.date()

        paths = []
        for step in range(bound + 1):
            day = candidate_date(today, granularity, step)
            paths.append((step, day.strftime(date_format)))
        return paths

    def resolve(self, template: str, now: datetime) -> str:
        """Resolve a directory template to an existing, non-empty directory.

        Args:
            template: Directory template, possibly with placeholders and wildcards.
            now: Reference time the search steps back from.

        Returns:
            Path of the newest non-empty matching directory at the first step
            that has one.

        Raises:
            DirectoryNotFoundError: If the lookback bound is exhausted.
        """
        granularity = detect_granularity(template)
        bound = self.lookback_bound(granularity)
        self.logger.debug(f"Resolving {template} by {granularity.value}, up to {bound} steps back")

        for step, path in self.candidate_paths(template, now):
            directory = self.find_latest_directory(path)
            if directory is not None:
                self.logger.info(f"Resolved {template} to {directory} ({step} steps back)")
                return directory
            self.logger.debug(f"Step {step}: no non-empty directory matches {path}")

        raise DirectoryNotFoundError(template, granularity, bound)

    def find_latest_directory(self, path: str) -> Optional[str]:
        """Return the most recently modified non-empty directory matching a glob."""
        candidates = []
        for match in glob.glob(path):
            if os.path.islink(match) or not os.path.isdir(match) or self._is_empty(match):
                continue
            try:
                candidates.append((os.stat(match).st_mtime, match))
            except OSError as e:
                self.logger.debug(f"Skipping {match}: {e}")

        if not candidates:
            return None

        candidates.sort(reverse=True)
        return candidates[0][1]

    def _is_empty(self, directory: str) -> bool:
        """Check whether a directory has no entries, treating unreadable ones as empty."""
        try:
            with os.scandir(directory) as entries:
                return next(entries, None) is None
        except OSError as e:
            self.logger.debug(f"Cannot read {directory}: {e}")
            return True
