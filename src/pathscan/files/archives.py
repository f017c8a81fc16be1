"""Mounting directories inside zip archives."""

import logging
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager

from pathscan.exceptions import ArchiveOpenError
from pathscan.exceptions import MalformedLocationError
from pathscan.files.paths import strip_leading_separator
from pathscan.files.paths import strip_scheme
from pathscan.files.paths import strip_trailing_separator

ARCHIVE_SCHEME = "zip"
ARCHIVE_SCHEMES = (ARCHIVE_SCHEME, "jar")
ARCHIVE_SEPARATOR = "!/"

logger = logging.getLogger(__name__)


def is_archive_uri(uri: str) -> bool:
    """Check if a location designates an entry inside an archive."""
    return uri.startswith(tuple(f"{scheme}:" for scheme in ARCHIVE_SCHEMES))


def split_archive_uri(uri: str) -> tuple[str, str]:
    """Split a decoded "zip:file:/a.zip!/inner" location into its parts.

    "jar:" locations are accepted too. The split is at the last "!/", so
    directories ending in "!" stay part of the archive path.

    Args:
        uri: Decoded archive location

    Returns:
        Tuple of (archive filesystem path, path inside the archive)

    Raises:
        MalformedLocationError: If the location has no "!/" separator
    """
    location = uri
    for scheme in ARCHIVE_SCHEMES:
        location = strip_scheme(location, scheme)
    location = strip_scheme(location, "file")
    archive_location, sep, internal_path = location.rpartition(ARCHIVE_SEPARATOR)
    if not sep:
        raise MalformedLocationError(uri, f"missing {ARCHIVE_SEPARATOR!r} separator")
    return archive_location, internal_path


@contextmanager
def mount(archive_location: str, internal_path: str) -> Iterator[zipfile.Path]:
    """Open an archive and yield a handle positioned at internal_path.

    The archive is opened fresh for each call and closed when the block
    exits, whether or not it raised.

    Args:
        archive_location: Filesystem path of the zip file
        internal_path: Directory inside the archive ("" for the archive root)

    Yields:
        zipfile.Path for the requested directory

    Raises:
        ArchiveOpenError: If the archive is missing, unreadable, not a zip
            file, or has no directory at internal_path
    """
    try:
        archive = zipfile.ZipFile(archive_location)
    except FileNotFoundError:
        raise ArchiveOpenError(archive_location, internal_path, "no such file")
    except zipfile.BadZipFile as e:
        raise ArchiveOpenError(archive_location, internal_path, str(e))
    except OSError as e:
        raise ArchiveOpenError(archive_location, internal_path, str(e))

    with archive:
        inner = strip_trailing_separator(strip_leading_separator(internal_path))
        root = zipfile.Path(archive, f"{inner}/" if inner else "")

        # zipfile.Path reports "" as missing, but it is always the top level
        if inner and not root.exists():
            raise ArchiveOpenError(
                archive_location, internal_path, "no such directory in archive"
            )

        logger.debug("mounted %s!/%s", archive_location, inner)
        yield root
