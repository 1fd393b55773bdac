"""Tests for the in-memory tree."""

import pytest

from files.backends.memory import MemoryBackend
from files.interfaces.filesystem import EntryKind, SpecialDirectory


@pytest.fixture
def tree():
    return MemoryBackend()


class TestTree:
    def test_default_directories(self, tree):
        assert tree.exists("/") is EntryKind.DIRECTORY
        assert tree.exists("/home/user/") is EntryKind.DIRECTORY
        assert tree.exists("/tmp") is EntryKind.DIRECTORY
        assert tree.exists("/nope") is EntryKind.ABSENT

    def test_create_file_requires_parent(self, tree):
        assert not tree.create("/a/b.txt", EntryKind.FILE).success
        assert tree.create("/a/", EntryKind.DIRECTORY).success
        assert tree.create("/a/b.txt", EntryKind.FILE, b"x").success
        assert tree.read_bytes("/a/b.txt") == b"x"

    def test_create_file_is_exclusive(self, tree):
        tree.create("/f", EntryKind.FILE, b"1")
        result = tree.create("/f", EntryKind.FILE, b"2")
        assert not result.success
        assert result.error
        assert tree.read_bytes("/f") == b"1"

    def test_create_directory_is_recursive(self, tree):
        assert tree.create("/x/y/z", EntryKind.DIRECTORY).success
        assert tree.exists("/x/y") is EntryKind.DIRECTORY

    def test_listing_keeps_insertion_order(self, tree):
        for name in ("c", "a", "b"):
            tree.create(f"/tmp/{name}", EntryKind.FILE)
        tree.create("/tmp/d", EntryKind.DIRECTORY)
        result = tree.list_children("/tmp/")
        assert result.error is None
        assert [(e.name, e.kind) for e in result.entries] == [
            ("c", EntryKind.FILE),
            ("a", EntryKind.FILE),
            ("b", EntryKind.FILE),
            ("d", EntryKind.DIRECTORY),
        ]

    def test_listing_errors(self, tree):
        tree.create("/f", EntryKind.FILE)
        assert tree.list_children("/missing").error
        assert tree.list_children("/f").error


class TestContents:
    def test_write_and_append(self, tree):
        tree.create("/f", EntryKind.FILE)
        assert tree.write_bytes("/f", b"ab").success
        assert tree.append_bytes("/f", b"cd").success
        assert tree.read_bytes("/f") == b"abcd"

    def test_append_to_missing_file_fails(self, tree):
        assert not tree.append_bytes("/missing", b"x").success

    def test_read_errors(self, tree):
        with pytest.raises(FileNotFoundError):
            tree.read_bytes("/missing")
        with pytest.raises(IsADirectoryError):
            tree.read_bytes("/tmp")

    def test_modification_time(self, tree):
        tree.create("/f", EntryKind.FILE)
        assert tree.modification_time("/f") is not None
        assert tree.modification_time("/missing") is None


class TestRelocation:
    def test_move(self, tree):
        tree.create("/a/b", EntryKind.DIRECTORY)
        tree.create("/a/b/f", EntryKind.FILE, b"x")
        assert tree.move("/a/b/", "/tmp/b").success
        assert tree.exists("/a/b") is EntryKind.ABSENT
        assert tree.read_bytes("/tmp/b/f") == b"x"

    def test_move_into_own_subtree_fails(self, tree):
        tree.create("/a/b", EntryKind.DIRECTORY)
        assert not tree.move("/a", "/a/b/a").success
        assert tree.exists("/a/b") is EntryKind.DIRECTORY

    def test_move_onto_existing_fails(self, tree):
        tree.create("/f", EntryKind.FILE)
        tree.create("/g", EntryKind.FILE)
        assert not tree.move("/f", "/g").success

    def test_copy_is_independent(self, tree):
        tree.create("/a", EntryKind.DIRECTORY)
        tree.create("/a/f", EntryKind.FILE, b"x")
        assert tree.copy("/a", "/b").success
        tree.write_bytes("/b/f", b"changed")
        assert tree.read_bytes("/a/f") == b"x"

    def test_remove(self, tree):
        tree.create("/a/b", EntryKind.DIRECTORY)
        assert tree.remove("/a").success
        assert tree.exists("/a/b") is EntryKind.ABSENT
        assert not tree.remove("/a").success
        assert not tree.remove("/").success


class TestSpecialDirectories:
    def test_defaults(self, tree):
        assert tree.special_directory(SpecialDirectory.HOME) == "/home/user"
        assert tree.special_directory(SpecialDirectory.CURRENT) == "/home/user"
        assert tree.special_directory(SpecialDirectory.TEMPORARY) == "/tmp"
        assert tree.special_directory(SpecialDirectory.DOCUMENTS) is None

    def test_configured_directories_are_created(self):
        tree = MemoryBackend(special_directories={"documents": "/home/user/Documents", "home": "/root"})
        assert tree.special_directory(SpecialDirectory.DOCUMENTS) == "/home/user/Documents"
        assert tree.special_directory(SpecialDirectory.HOME) == "/root"
        assert tree.exists("/root") is EntryKind.DIRECTORY

    def test_removed_directory_is_unavailable(self, tree):
        tree.remove("/tmp")
        assert tree.special_directory(SpecialDirectory.TEMPORARY) is None

    def test_chdir(self, tree):
        tree.create("/work", EntryKind.DIRECTORY)
        tree.chdir("/work/")
        assert tree.special_directory(SpecialDirectory.CURRENT) == "/work"
        with pytest.raises(OSError):
            tree.chdir("/missing")
