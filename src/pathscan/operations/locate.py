"""Locating the search roots that contain a package."""

import logging
import os
import sys
import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

from pathscan.exceptions import ResolutionError
from pathscan.files.archives import ARCHIVE_SCHEME
from pathscan.files.archives import ARCHIVE_SEPARATOR

logger = logging.getLogger(__name__)

_URI_SAFE = "/:\\"


class ResourceLoader(Protocol):
    """Anything that can report where a relative path exists."""

    def resources_for_path(self, path: str) -> Sequence[str]: ...


class SearchPathLoader:
    """Resource loader over a list of directories and zip files.

    Behaves like Python's import machinery: entries are checked in order,
    directories directly and zip files by their member names.
    """

    def __init__(self, search_path: Sequence[str | os.PathLike] | None = None):
        """Create a loader.

        Args:
            search_path: Entries to search. If None, sys.path is read at
                query time.
        """
        self.search_path = search_path

    def resources_for_path(self, path: str) -> list[str]:
        """Return a location URI for every entry that contains path.

        Args:
            path: "/"-separated package path ("" matches every entry)

        Returns:
            "file:" URIs for directories, "zip:file:...!/path" URIs for
            archives, percent-encoded, in search path order

        Raises:
            ResolutionError: If path is not a plain relative path, an entry
                is not a path, or a zip file on the search path cannot be read
        """
        _check_package_path(path)
        entries = sys.path if self.search_path is None else self.search_path
        uris = []
        for entry in entries:
            if not isinstance(entry, (str, os.PathLike)):
                raise ResolutionError(f"Invalid search path entry: {entry!r}")

            # "" on sys.path means the current directory
            entry_path = Path(entry).absolute()
            if entry_path.is_dir():
                package_dir = entry_path / path if path else entry_path
                if package_dir.is_dir():
                    uris.append(f"file:{quote(str(package_dir), safe=_URI_SAFE)}")
            elif zipfile.is_zipfile(entry_path):
                if _archive_has_directory(entry_path, path):
                    archive = quote(str(entry_path), safe=_URI_SAFE)
                    inner = quote(path, safe=_URI_SAFE)
                    uris.append(
                        f"{ARCHIVE_SCHEME}:file:{archive}{ARCHIVE_SEPARATOR}{inner}"
                    )
        return uris


def _check_package_path(path: str) -> None:
    # Empty, "." or ".." segments would escape or skip past the entry
    if not path:
        return
    segments = path.replace("\\", "/").split("/")
    if Path(path).anchor or any(segment in ("", ".", "..") for segment in segments):
        raise ResolutionError(f"Invalid package path: {path!r}")


def _archive_has_directory(archive_path: Path, path: str) -> bool:
    if not path:
        return True
    prefix = f"{path}/"
    try:
        with zipfile.ZipFile(archive_path) as archive:
            return any(name.startswith(prefix) for name in archive.namelist())
    except (zipfile.BadZipFile, OSError) as e:
        raise ResolutionError(f"Cannot read search path archive {archive_path}: {e}")


class RootLocator:
    """Finds every search root that exposes a package path."""

    def __init__(self, loader: ResourceLoader):
        self.loader = loader

    def locate(self, base_package_path: str) -> list[str]:
        """Query the loader for base_package_path.

        Args:
            base_package_path: "/"-separated package path

        Returns:
            Raw (still percent-encoded) location URIs, empty if the package
            is not found anywhere

        Raises:
            ResolutionError: If the loader query fails
        """
        logger.debug("scan path: %s", base_package_path)
        try:
            uris = list(self.loader.resources_for_path(base_package_path))
        except ResolutionError:
            raise
        except Exception as e:
            raise ResolutionError(
                f"Resource loader failed for {base_package_path!r}: {e}"
            ) from e

        for uri in uris:
            logger.debug("found root: %s", uri)
        return uris
