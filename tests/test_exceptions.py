"""Tests for pathscan exceptions."""

from pathscan.exceptions import ArchiveOpenError
from pathscan.exceptions import MalformedLocationError
from pathscan.exceptions import PathscanError
from pathscan.exceptions import ResolutionError
from pathscan.exceptions import WalkError


class TestArchiveOpenError:
    """Tests for ArchiveOpenError."""

    def test_message_names_archive_and_internal_path(self):
        error = ArchiveOpenError("/x/lib.zip", "app/data", "no such file")

        assert "/x/lib.zip" in str(error)
        assert "'app/data'" in str(error)
        assert "no such file" in str(error)


class TestWalkError:
    """Tests for WalkError."""

    def test_keeps_cause(self):
        """Test that the underlying OSError is available to callers."""
        cause = PermissionError(13, "Permission denied")

        error = WalkError("/x/app/secret", cause)

        assert error.cause is cause
        assert error.path == "/x/app/secret"
        assert "Permission denied" in str(error)


class TestMalformedLocationError:
    """Tests for MalformedLocationError."""

    def test_message_includes_location(self):
        error = MalformedLocationError("file:/x/%zz", "invalid escape at position 8")

        assert "file:/x/%zz" in str(error)
        assert "position 8" in str(error)


def test_all_errors_share_base():
    """Test that callers can catch every scan failure at once."""
    for error_type in (
        ArchiveOpenError,
        MalformedLocationError,
        ResolutionError,
        WalkError,
    ):
        assert issubclass(error_type, PathscanError)
