"""Errors that end a check run in the UNKNOWN state."""

from .models import Granularity


class CheckError(Exception):
    """Base class for errors that prevent a file from being evaluated."""


class ArgumentError(CheckError, ValueError):
    """A required option is missing or an option value is unusable."""


class ThresholdParseError(CheckError, ValueError):
    """A threshold string could not be converted to seconds or bytes."""

    def __init__(self, value: str, description: str):
        self.value = value
        self.description = description
        super().__init__(f"{value} is an invalid {description}!")


class DirectoryNotFoundError(CheckError):
    """No non-empty directory matched the template within the lookback bound."""

    def __init__(self, template: str, granularity: Granularity, bound: int):
        self.template = template
        self.granularity = granularity
        self.bound = bound
        if granularity is Granularity.NONE:
            message = f"Cannot find directory {template}"
        else:
            message = (
                "Cannot find directory. Either the target directory was not "
                "specified correctly, or the latest file is over "
                f"{bound} {granularity.unit_name} old"
            )
        super().__init__(message)


class NoMatchingFileError(CheckError):
    """The resolved directory holds no file whose basename matches the pattern."""

    def __init__(self, directory: str, pattern: str):
        self.directory = directory
        self.pattern = pattern
        super().__init__(f"Cannot find a matching file in {directory}!")
