"""File enumeration and latest-file selection."""

import os
import re
from re import Pattern
import stat
import logging
from datetime import datetime
from typing import List, Optional, Union

from .exceptions import ArgumentError, NoMatchingFileError
from .models import FileInfo


def compile_pattern(pattern: str) -> Pattern:
    """Compile a basename pattern, reporting bad expressions as argument errors."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ArgumentError(f"{pattern} is an invalid file pattern: {e}")


class DirectoryScanner:
    """Scans a resolved directory and picks the newest matching file."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def list_files(self, directory: str) -> List[FileInfo]:
        """Collect every regular file below a directory.

        Symbolic links are not followed and are not counted as files.

        Args:
            directory: Directory to walk recursively.

        Returns:
            List of FileInfo objects in walk order.
        """
        files = []

        for root, dirs, names in os.walk(directory):
            for name in names:
                path = os.path.join(root, name)
                try:
                    file_stat = os.lstat(path)
                except OSError as e:
                    self.logger.debug(f"Skipping {path}: {e}")
                    continue

                if not stat.S_ISREG(file_stat.st_mode):
                    continue

                files.append(FileInfo(
                    path=path,
                    name=name,
                    size=file_stat.st_size,
                    modified_time=datetime.fromtimestamp(file_stat.st_mtime),
                    mtime=file_stat.st_mtime
                ))

        self.logger.debug(f"Found {len(files)} files under {directory}")
        return files

    @staticmethod
    def sort_by_recency(files: List[FileInfo]) -> List[FileInfo]:
        """Newest first; equal modification times fall back to path, descending."""
        return sorted(files, key=lambda f: (f.mtime, f.path), reverse=True)

    @staticmethod
    def first_match(files: List[FileInfo], pattern: Pattern) -> Optional[FileInfo]:
        """First file whose whole basename matches the pattern."""
        for file_info in files:
            if pattern.fullmatch(file_info.name):
                return file_info
        return None

    def select_latest(self, directory: str, pattern: Union[str, Pattern]) -> FileInfo:
        """Find the most recently modified file whose basename matches.

        Args:
            directory: Resolved directory to search.
            pattern: Regular expression that must match the entire basename.

        Returns:
            FileInfo of the selected file.

        Raises:
            NoMatchingFileError: If no basename matches.
        """
        if isinstance(pattern, str):
            pattern = compile_pattern(pattern)

        files = self.list_files(directory)
        ordered = self.sort_by_recency(files)
        latest = self.first_match(ordered, pattern)

        if latest is None:
            raise NoMatchingFileError(directory, pattern.pattern)

        self.logger.debug(f"Selected {latest.path} from {len(files)} files")
        return latest
