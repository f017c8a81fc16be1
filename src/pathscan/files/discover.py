"""Regular file discovery in directories and archives."""

import zipfile
from collections.abc import Iterator
from pathlib import Path

from pathscan.exceptions import WalkError


def walk(root: Path | zipfile.Path, follow_symlinks: bool = False) -> Iterator[str]:
    """Yield every regular file below root.

    Args:
        root: Directory on disk, or a directory handle from an archive mount
        follow_symlinks: Descend into symlinked directories. Each directory
            is entered at most once, so symlink cycles terminate.

    Yields:
        Absolute path strings for directories, member paths for archives.
        Children are visited in name order so repeated walks of an
        unchanged tree agree.

    Raises:
        WalkError: If a directory cannot be read
    """
    if isinstance(root, zipfile.Path):
        yield from _walk_archive(root)
    else:
        yield from _walk_directory(Path(root), follow_symlinks)


def _walk_directory(root: Path, follow_symlinks: bool) -> Iterator[str]:
    def on_error(error: OSError) -> None:
        raise WalkError(error.filename or str(root), error)

    visited: set[tuple[int, int]] = set()
    if follow_symlinks:
        visited.add(_identity(root))

    for dirpath, dirnames, filenames in root.walk(
        on_error=on_error, follow_symlinks=follow_symlinks
    ):
        dirnames.sort()
        if follow_symlinks:
            # Prune in place so Path.walk never enters a directory twice
            unseen = []
            for dirname in dirnames:
                identity = _identity(dirpath / dirname)
                if identity not in visited:
                    visited.add(identity)
                    unseen.append(dirname)
            dirnames[:] = unseen

        for filename in sorted(filenames):
            file_path = dirpath / filename
            try:
                is_regular = file_path.is_file()
            except OSError as e:
                raise WalkError(str(file_path), e) from e
            # Skips broken links, devices, sockets and unfollowed dir links
            if is_regular:
                yield str(file_path)


def _walk_archive(root: zipfile.Path) -> Iterator[str]:
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            yield from _walk_archive(child)
        else:
            yield child.at


def _identity(path: Path) -> tuple[int, int]:
    try:
        st = path.stat()
    except OSError as e:
        raise WalkError(str(path), e) from e
    return (st.st_dev, st.st_ino)
