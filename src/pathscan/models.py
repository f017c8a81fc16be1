"""Data models for pathscan."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Resource:
    """A regular file discovered under a scanned package."""

    location: str  # "file:/abs/path" for directories, member path for archives
    name: str  # Relative to the base package, always "/"-separated


@dataclass(frozen=True)
class DirectoryRoot:
    """A search root backed by a real directory."""

    base_path: str  # Absolute directory of the package
    search_root: str  # Search path entry the package was found under


@dataclass(frozen=True)
class ArchiveRoot:
    """A search root backed by a directory inside a zip archive."""

    archive_location: str  # Filesystem path of the zip file
    internal_base_path: str  # Package directory inside the archive
    search_root: str


ScanRoot = DirectoryRoot | ArchiveRoot


class RootErrorMode(str, Enum):
    """What to do when a single root fails to mount or walk."""

    ABORT = "abort"
    SKIP = "skip"
