"""Custom exceptions for pathscan."""


class PathscanError(Exception):
    """Base exception for pathscan."""


class ResolutionError(PathscanError):
    """The resource loader could not answer a search path query."""


class MalformedLocationError(PathscanError):
    """A location URI could not be percent-decoded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Malformed location {location!r}: {reason}")


class ArchiveOpenError(PathscanError):
    """Archive could not be opened, or the internal path is missing."""

    def __init__(self, archive_location: str, internal_path: str, reason: str):
        self.archive_location = archive_location
        self.internal_path = internal_path
        super().__init__(
            f"Cannot mount {internal_path!r} in {archive_location}: {reason}"
        )


class WalkError(PathscanError):
    """A directory could not be read during traversal."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read directory {path}: {cause}")


class SettingsValidationError(PathscanError):
    """Settings file is invalid or malformed."""


class SettingsVersionError(PathscanError):
    """Settings version is unsupported."""
