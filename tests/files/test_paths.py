"""Tests for files.paths."""

import pytest

from files import paths
from files.errors import LocationError, LocationErrorReason
from files.interfaces.filesystem import EntryKind, SpecialDirectory


class TestNormalize:
    def test_collapses_dots_and_separators(self):
        assert paths.normalize("/a/./b//c/../d") == "/a/b/d"

    def test_root(self):
        assert paths.normalize("/") == "/"
        assert paths.normalize("//") == "/"

    def test_parent_of_root_stays_at_root(self):
        assert paths.normalize("/..") == "/"
        assert paths.normalize("/../../a") == "/a"


class TestResolve:
    """Tests for resolve()."""

    def test_empty_is_current_directory(self, memory):
        assert paths.resolve("", backend=memory) == "/home/user"
        assert paths.resolve("", backend=memory, directory=True) == "/home/user/"

    def test_tilde_expands_to_home(self, memory):
        assert paths.resolve("~", backend=memory) == "/home/user"
        assert paths.resolve("~/docs/a.txt", backend=memory) == "/home/user/docs/a.txt"

    def test_tilde_only_as_whole_segment(self, memory):
        assert paths.resolve("~other/x", relative_to="/r/", backend=memory) == "/r/~other/x"

    def test_relative_to_folder(self, memory):
        assert paths.resolve("a/b", relative_to="/x/y/", backend=memory) == "/x/y/a/b"
        assert paths.resolve("../file", relative_to="/x/y/", backend=memory) == "/x/file"

    def test_relative_to_current_directory(self, memory):
        memory.create("/home/user/sub", EntryKind.DIRECTORY)
        memory.chdir("/home/user/sub")
        assert paths.resolve("../file", backend=memory) == "/home/user/file"

    def test_absolute_ignores_relative_to(self, memory):
        assert paths.resolve("/A/../B/../C/file", relative_to="/x/", backend=memory) == "/C/file"

    def test_directory_form(self, memory):
        assert paths.resolve("/a/b//", backend=memory, directory=True) == "/a/b/"
        assert paths.resolve("/", backend=memory, directory=True) == "/"

    def test_missing_home_raises_location_error(self, memory, monkeypatch):
        monkeypatch.setattr(memory, "special_directory", lambda kind: None)
        with pytest.raises(LocationError) as exc_info:
            paths.resolve("~/x", backend=memory)
        assert exc_info.value.reason is LocationErrorReason.MISSING
        assert exc_info.value.path == SpecialDirectory.HOME.value


class TestJoin:
    def test_leading_separator_is_dropped(self):
        assert paths.join("/f/", "a/b/c.txt") == paths.join("/f/", "/a/b/c.txt") == "/f/a/b/c.txt"

    def test_directory_form(self):
        assert paths.join("/f/", "a/b", directory=True) == "/f/a/b/"

    def test_no_tilde_expansion(self):
        assert paths.join("/f/", "~/x") == "/f/~/x"


class TestNameDecomposition:
    def test_name(self):
        assert paths.name("/a/b.txt") == "b.txt"
        assert paths.name("/a/b/") == "b"
        assert paths.name("/") == ""

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("test.txt", "txt"),
            ("archive.tar.gz", "gz"),
            ("File", None),
            (".hidden", None),
            ("file.", ""),
        ],
    )
    def test_extension(self, file_name, expected):
        assert paths.extension(file_name) == expected

    def test_name_excluding_extension(self):
        assert paths.name_excluding_extension("AVeryLongFileName.png") == "AVeryLongFileName"
        assert paths.name_excluding_extension("File") == "File"
        assert paths.name_excluding_extension(".bashrc") == ".bashrc"
        assert paths.name_excluding_extension("file.") == "file"

    def test_parent_path(self):
        assert paths.parent_path("/a/b.txt") == "/a/"
        assert paths.parent_path("/a/b/") == "/a/"
        assert paths.parent_path("/a") == "/"
        assert paths.parent_path("/") is None

    def test_is_hidden(self):
        assert paths.is_hidden(".git")
        assert not paths.is_hidden("git")


class TestRelativePath:
    def test_strips_root_prefix(self):
        assert paths.relative_path("/f/Folder/FileB", "/f/") == "Folder/FileB"
        assert paths.relative_path("/f/Folder/", "/f/") == "Folder"

    def test_falls_back_to_absolute_path(self):
        assert paths.relative_path("/g/x", "/f/") == "/g/x"
        assert paths.relative_path("/f/", "/f/") == "/f/"

    def test_prefix_must_end_on_segment(self):
        assert paths.relative_path("/foobar/x", "/foo") == "/foobar/x"
