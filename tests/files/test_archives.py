"""Tests for mounting directories inside zip archives."""

import zipfile

import pytest

from pathscan.exceptions import ArchiveOpenError
from pathscan.exceptions import MalformedLocationError
from pathscan.files import is_archive_uri
from pathscan.files import mount
from pathscan.files import split_archive_uri


@pytest.fixture
def archive(tmp_path):
    """A zip file with a small app/data package."""
    archive_path = tmp_path / "lib.zip"
    with zipfile.ZipFile(archive_path, "w") as zf:
        zf.writestr("app/data/c.txt", "c")
        zf.writestr("app/data/sub/d.txt", "d")
        zf.writestr("app/readme.txt", "readme")
    return archive_path


class TestMount:
    """Tests for mount()."""

    def test_mount_positions_handle_at_internal_path(self, archive):
        """Test that the handle lists the requested directory's children."""
        with mount(str(archive), "app/data") as handle:
            names = sorted(child.name for child in handle.iterdir())

        assert names == ["c.txt", "sub"]

    def test_mount_accepts_surrounding_separators(self, archive):
        """Test that /app/data/ is the same directory as app/data."""
        with mount(str(archive), "/app/data/") as handle:
            assert handle.at == "app/data/"

    def test_mount_archive_root(self, archive):
        """Test that an empty internal path mounts the top level."""
        with mount(str(archive), "") as handle:
            names = sorted(child.name for child in handle.iterdir())

        assert names == ["app"]

    def test_mount_closes_archive_on_exit(self, archive):
        """Test that the archive is closed once the block ends."""
        with mount(str(archive), "app/data") as handle:
            opened = handle.root

        assert opened.fp is None

    def test_mount_closes_archive_on_error(self, archive):
        """Test that the archive is closed when the block raises."""
        with pytest.raises(RuntimeError):
            with mount(str(archive), "app/data") as handle:
                opened = handle.root
                raise RuntimeError("boom")

        assert opened.fp is None

    def test_mount_same_archive_twice(self, archive):
        """Test that overlapping mounts of one archive are independent."""
        with mount(str(archive), "app/data") as first:
            with mount(str(archive), "app") as second:
                assert first.root is not second.root
                assert (second / "readme.txt").read_text() == "readme"
            assert (first / "c.txt").read_text() == "c"

    def test_missing_archive(self, tmp_path):
        """Test that a missing archive raises ArchiveOpenError."""
        with pytest.raises(ArchiveOpenError) as exc_info:
            with mount(str(tmp_path / "missing.zip"), "app"):
                pass

        assert exc_info.value.archive_location == str(tmp_path / "missing.zip")

    def test_not_a_zip_file(self, tmp_path):
        """Test that a non-zip file raises ArchiveOpenError."""
        bogus = tmp_path / "bogus.zip"
        bogus.write_text("not a zip")

        with pytest.raises(ArchiveOpenError):
            with mount(str(bogus), "app"):
                pass

    def test_missing_internal_path(self, archive):
        """Test that a directory absent from the archive raises ArchiveOpenError."""
        with pytest.raises(ArchiveOpenError) as exc_info:
            with mount(str(archive), "app/missing"):
                pass

        assert exc_info.value.internal_path == "app/missing"

    def test_internal_path_is_a_file(self, archive):
        """Test that a file member cannot be mounted as a directory."""
        with pytest.raises(ArchiveOpenError):
            with mount(str(archive), "app/readme.txt"):
                pass


class TestArchiveUris:
    """Tests for is_archive_uri() and split_archive_uri()."""

    def test_is_archive_uri(self):
        assert is_archive_uri("zip:file:/x/lib.zip!/app")
        assert not is_archive_uri("file:/x/app")

    def test_split_archive_uri(self):
        """Test splitting into archive path and internal path."""
        uri = "zip:file:/x/my lib.zip!/app/data"

        assert split_archive_uri(uri) == ("/x/my lib.zip", "app/data")

    def test_split_archive_uri_without_separator(self):
        """Test that a location missing !/ is malformed."""
        with pytest.raises(MalformedLocationError):
            split_archive_uri("zip:file:/x/lib.zip")

    def test_jar_scheme_is_archive(self):
        """Test that Java-style jar: locations are treated as archives."""
        uri = "jar:file:/x/lib.jar!/app/data"

        assert is_archive_uri(uri)
        assert split_archive_uri(uri) == ("/x/lib.jar", "app/data")

    def test_split_at_last_separator(self):
        """Test that a directory ending in ! stays in the archive path."""
        uri = "zip:file:/x/wow!/lib.zip!/app"

        assert split_archive_uri(uri) == ("/x/wow!/lib.zip", "app")
