from __future__ import annotations

from typing import Iterable, List


class WordsmithError(Exception):
    """Base class for every failure the build and init commands report."""


class InvalidTag(WordsmithError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid tag {name}")


class InvalidComponentClosingTag(WordsmithError):
    """A custom block was closed with a tag of another kind, e.g. @info ... @endwarn."""

    def __init__(self, opened: str, closed: str):
        self.opened = opened
        self.closed = closed
        super().__init__(f"Invalid closing tag {opened}, {closed}")


class ProjectNotFound(WordsmithError):
    def __init__(self, path: str = ""):
        self.path = path
        super().__init__("Project not found" + (f" in {path}" if path else ""))


class ProjectConflict(WordsmithError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Project already exists in {path} folder")


class ThemeNotFound(WordsmithError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Theme {path} not found")


# Configuration errors
class ConfigError(WordsmithError):
    pass


class ConfigCoverNotDefined(ConfigError):
    def __init__(self):
        super().__init__("Cover configuration is missing or invalid")


class ConfigCoverFileIsInvalid(ConfigError):
    def __init__(self):
        super().__init__("Cover configuration file is not defined or empty")


class ConfigValidationError(ConfigError):
    """Every malformed field found in ws.yaml, reported together."""

    def __init__(self, problems: Iterable[str]):
        self.problems: List[str] = list(problems)
        super().__init__("Invalid configuration: " + "; ".join(self.problems))


class FileEncodingError(WordsmithError):
    """A project file could not be decoded as UTF-8."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"{path} is not valid UTF-8: {reason}")
