"""Collecting resources for a package across all of its search roots."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pathscan.exceptions import ArchiveOpenError
from pathscan.exceptions import WalkError
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
from pathscan.models import ArchiveRoot
from pathscan.models import DirectoryRoot
from pathscan.models import Resource
from pathscan.models import RootErrorMode
from pathscan.models import ScanRoot
from pathscan.operations.locate import ResourceLoader
from pathscan.operations.locate import RootLocator
from pathscan.operations.locate import SearchPathLoader

R = TypeVar("R")

logger = logging.getLogger(__name__)


def to_scan_root(uri: str, base_package_path: str) -> ScanRoot:
    """Classify a raw location URI as a directory or archive root.

    Args:
        uri: Percent-encoded location from the resource loader
        base_package_path: "/"-separated package path the URI was found for

    Returns:
        ArchiveRoot for "zip:" locations, DirectoryRoot otherwise

    Raises:
        MalformedLocationError: If the URI cannot be decoded
    """
    # Decode before any length arithmetic so escapes don't skew offsets
    decoded = strip_trailing_separator(decode(uri))
    search_root = decoded[: len(decoded) - len(base_package_path)]

    if is_archive_uri(decoded):
        archive_location, _ = split_archive_uri(decoded)
        return ArchiveRoot(
            archive_location=archive_location,
            internal_base_path=base_package_path,
            search_root=search_root,
        )

    return DirectoryRoot(
        base_path=strip_scheme(decoded, "file"),
        search_root=strip_scheme(search_root, "file"),
    )


class ResourceCollector:
    """Scans packages for resources across directories and archives."""

    def __init__(
        self,
        loader: ResourceLoader | None = None,
        on_root_error: RootErrorMode = RootErrorMode.SKIP,
        follow_symlinks: bool = False,
    ):
        """Create a collector.

        Args:
            loader: Source of search roots (default: SearchPathLoader over
                sys.path)
            on_root_error: SKIP drops a root that fails to mount or walk and
                keeps scanning; ABORT propagates the first such failure
            follow_symlinks: Descend into symlinked directories
        """
        self.locator = RootLocator(loader if loader is not None else SearchPathLoader())
        self.on_root_error = on_root_error
        self.follow_symlinks = follow_symlinks

    def scan(
        self, base_package: str, transform: Callable[[Resource], R | None]
    ) -> list[R]:
        """Find every regular file under base_package and transform it.

        Args:
            base_package: Dotted package path, e.g. "app.data"
            transform: Called once per Resource; None results are dropped

        Returns:
            Non-None transform results, in walk order within each root and
            root order across roots. Empty if the package is not found.

        Raises:
            ResolutionError: If the loader query fails
            MalformedLocationError: If a root location cannot be decoded
            ArchiveOpenError: If on_root_error is ABORT and an archive root
                cannot be mounted
            WalkError: If on_root_error is ABORT and a root cannot be walked
        """
        base_package_path = package_to_path(base_package)
        roots = [
            to_scan_root(uri, base_package_path)
            for uri in self.locator.locate(base_package_path)
        ]

        collected: list[R] = []
        for root in roots:
            try:
                results = self._scan_root(root, transform)
            except (ArchiveOpenError, WalkError) as e:
                if self.on_root_error == RootErrorMode.ABORT:
                    raise
                logger.warning("Skipping root %s: %s", root.search_root, e)
                continue
            collected.extend(results)

        return collected

    def _scan_root(
        self, root: ScanRoot, transform: Callable[[Resource], R | None]
    ) -> list[R]:
        # Results are only merged once the whole root has been walked
        results: list[R] = []

        if isinstance(root, ArchiveRoot):
            inner = strip_trailing_separator(
                strip_leading_separator(root.internal_base_path)
            )
            with mount(root.archive_location, inner) as handle:
                for member in walk(handle):
                    resource = Resource(
                        location=member, name=relative_name(member, len(inner))
                    )
                    _apply(resource, transform, results)
        else:
            base_dir = Path(root.base_path)
            base_length = len(str(base_dir))
            for path in walk(base_dir, follow_symlinks=self.follow_symlinks):
                resource = Resource(
                    location=f"file:{path}", name=relative_name(path, base_length)
                )
                _apply(resource, transform, results)

        return results


def _apply(
    resource: Resource, transform: Callable[[Resource], R | None], results: list[R]
) -> None:
    logger.debug("found resource: %s", resource)
    result = transform(resource)
    if result is not None:
        results.append(result)


def scan_resources(
    base_package: str,
    transform: Callable[[Resource], R | None] | None = None,
    **options,
) -> list:
    """Scan base_package with a one-off ResourceCollector.

    Args:
        base_package: Dotted package path
        transform: Per-resource transform (default: keep the Resource)
        **options: Passed to ResourceCollector

    Returns:
        Transform results, or Resources when no transform is given
    """
    collector = ResourceCollector(**options)
    if transform is None:
        return collector.scan(base_package, lambda resource: resource)
    return collector.scan(base_package, transform)
