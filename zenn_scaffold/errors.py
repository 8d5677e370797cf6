"""Exception hierarchy and exit codes for zenn-scaffold."""
from __future__ import annotations

from dataclasses import dataclass

OK = 0
ERR_NOT_FOUND = 1
ERR_USAGE = 2
ERR_DIRECTORY = 3
ERR_WRITE = 4


@dataclass
class ScaffoldError(Exception):
    message: str
    code: int = ERR_USAGE

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(ScaffoldError):
    """Config file or flag values are unusable."""


@dataclass
class InvalidSlugError(ScaffoldError):
    """An explicitly requested slug does not satisfy the Zenn slug rule."""


@dataclass
class DirectoryCreationError(ScaffoldError):
    """The articles directory could not be created or is not a directory."""

    code: int = ERR_DIRECTORY


@dataclass
class WriteError(ScaffoldError):
    """The article file could not be created."""

    code: int = ERR_WRITE
