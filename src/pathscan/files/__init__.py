"""Filesystem and archive operations for pathscan."""

from pathscan.files.archives import is_archive_uri
from pathscan.files.archives import mount
from pathscan.files.archives import split_archive_uri
from pathscan.files.discover import walk
from pathscan.files.paths import decode
from pathscan.files.paths import package_to_path
from pathscan.files.paths import relative_name
from pathscan.files.paths import strip_leading_separator
from pathscan.files.paths import strip_scheme
from pathscan.files.paths import strip_trailing_separator

__all__ = [
    "decode",
    "is_archive_uri",
    "mount",
    "package_to_path",
    "relative_name",
    "split_archive_uri",
    "strip_leading_separator",
    "strip_scheme",
    "strip_trailing_separator",
    "walk",
]
