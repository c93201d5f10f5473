"""
Tests for the file operations module.
"""

import errno
import os
import pytest
import tempfile
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.file_utils.file_ops import (
    NEW_LINE,
    exists,
    read_file,
    parse_file,
    create_file,
    write_to_file,
    write_lines,
    append_to_file,
    append_lines,
    rename_file,
    move_file,
    copy_file,
    truncate_file,
    delete_file,
)
from modules.file_utils.listing import list_files, list_directories
from modules.file_utils.errors import (
    ErrorKind,
    MissingArgumentError,
    PathMissingError,
    SourcePathMissingError,
    TargetPathMissingError,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def test_file(temp_dir):
    """Create an empty file inside the temporary directory."""
    path = temp_dir / "test.txt"
    path.touch()
    return path


class TestExists:
    """Test exists()."""

    def test_none_is_false(self):
        assert exists(None) is False

    def test_existing_file(self, test_file):
        assert exists(test_file)
        assert exists(str(test_file))

    def test_false_after_delete(self, test_file):
        delete_file(str(test_file))
        assert not exists(str(test_file))


class TestMissingPaths:
    """Every path-accepting operation rejects None before touching the file system."""

    @pytest.mark.parametrize("call", [
        lambda: read_file(None),
        lambda: parse_file(None),
        lambda: create_file(None),
        lambda: create_file(None, "content"),
        lambda: write_to_file(None, "content"),
        lambda: write_lines(None, ["a", "b"]),
        lambda: append_to_file(None, "content", True),
        lambda: append_lines(None, ["a"], True),
        lambda: rename_file(None, "other.txt"),
        lambda: truncate_file(None),
        lambda: delete_file(None),
        lambda: list_files(None),
        lambda: list_directories(None),
    ])
    def test_path_missing(self, call):
        with pytest.raises(PathMissingError) as info:
            call()
        assert info.value.kind == ErrorKind.PATH_MISSING

    def test_missing_path_is_not_os_error(self):
        with pytest.raises(MissingArgumentError) as info:
            read_file(None)
        assert not isinstance(info.value, OSError)

    def test_source_checked_before_target(self):
        with pytest.raises(SourcePathMissingError):
            move_file(None, None)
        with pytest.raises(SourcePathMissingError):
            copy_file(None, None)

    def test_target_missing(self, test_file):
        with pytest.raises(TargetPathMissingError):
            move_file(test_file, None)
        with pytest.raises(TargetPathMissingError):
            copy_file(test_file, None)
        assert exists(test_file)

    def test_rename_without_name(self, test_file):
        with pytest.raises(TargetPathMissingError):
            rename_file(test_file, None)
        assert exists(test_file)

    @pytest.mark.parametrize("call", [
        lambda d: read_file(None),
        lambda d: parse_file(None),
        lambda d: create_file(None, "content"),
        lambda d: write_to_file(None, "content"),
        lambda d: write_lines(None, ["a", "b"]),
        lambda d: append_to_file(None, "content", True),
        lambda d: append_lines(None, ["a"], True),
        lambda d: rename_file(None, "renamed.txt"),
        lambda d: rename_file(d / "existing.txt", None),
        lambda d: move_file(None, d / "target.txt"),
        lambda d: move_file(d / "existing.txt", None),
        lambda d: copy_file(None, d / "target.txt"),
        lambda d: copy_file(d / "existing.txt", None),
        lambda d: truncate_file(None),
        lambda d: delete_file(None),
        lambda d: list_files(None),
        lambda d: list_directories(None),
    ])
    def test_no_side_effect(self, temp_dir, call):
        existing = create_file(temp_dir / "existing.txt", "keep")
        with pytest.raises(MissingArgumentError):
            call(temp_dir)
        assert list(temp_dir.iterdir()) == [existing]
        assert read_file(existing) == "keep"


class TestReadWrite:
    """Test reading, creating and writing files."""

    def test_round_trip(self, test_file):
        write_to_file(test_file, "abc")
        assert read_file(test_file) == "abc"

    def test_write_replaces_longer_content(self, test_file):
        create_file(test_file, "This is a much longer line.")
        write_to_file(test_file, "short")
        assert read_file(test_file) == "short"

    def test_write_none_empties_file(self, test_file):
        create_file(test_file, "content")
        write_to_file(test_file, None)
        assert read_file(test_file) == ""

    @pytest.mark.skipif(os.name == "nt", reason="write-only mode bits are POSIX only")
    def test_write_to_write_only_file(self, test_file):
        create_file(test_file, "old content")
        os.chmod(test_file, 0o222)
        try:
            write_to_file(test_file, "new")
            write_lines(test_file, ["a", "b"])
        finally:
            os.chmod(test_file, 0o644)
        assert read_file(test_file) == "a" + NEW_LINE + "b"

    def test_write_does_not_create(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            write_to_file(temp_dir / "missing.txt", "abc")
        assert not exists(temp_dir / "missing.txt")

    def test_write_lines(self, test_file):
        write_lines(test_file, ["a", "b"])
        assert read_file(test_file) == "a" + NEW_LINE + "b"
        assert parse_file(test_file) == ["a", "b"]

    def test_write_lines_none(self, test_file):
        create_file(test_file, "content")
        write_lines(test_file, None)
        assert read_file(test_file) == ""

    def test_write_lines_custom_separator(self, test_file):
        write_lines(test_file, ["a", "b"], separator="\r\n")
        assert read_file(test_file) == "a\r\nb"
        assert parse_file(test_file) == ["a", "b"]

    def test_create_file(self, temp_dir):
        path = create_file(str(temp_dir / "new.txt"))
        assert isinstance(path, Path)
        assert exists(path)
        assert read_file(path) == ""

    def test_create_file_truncates(self, test_file):
        create_file(test_file, "first version")
        create_file(test_file, "v2")
        assert read_file(test_file) == "v2"

    def test_create_file_missing_parent(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            create_file(temp_dir / "no" / "such" / "file.txt")

    def test_read_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            read_file(temp_dir / "missing.txt")

    def test_parse_mixed_line_endings(self, test_file):
        test_file.write_bytes(b"one\r\ntwo\nthree\rfour\n")
        assert parse_file(test_file) == ["one", "two", "three", "four"]

    def test_parse_keeps_inner_blank_lines(self, test_file):
        test_file.write_bytes(b"a\n\nb")
        assert parse_file(test_file) == ["a", "", "b"]

    def test_encoding(self, test_file):
        create_file(test_file, "café", encoding="latin-1")
        assert test_file.read_bytes() == b"caf\xe9"
        assert read_file(test_file, encoding="latin-1") == "café"


class TestAppend:
    """Test appending to files."""

    def test_append(self, test_file):
        create_file(test_file, "This is a test file.")
        append_to_file(test_file, "More text", False)
        assert read_file(test_file) == "This is a test file.More text"

    def test_append_with_separator(self, test_file):
        create_file(test_file, "X")
        append_to_file(test_file, "Y", True)
        assert read_file(test_file) == "X" + NEW_LINE + "Y"

    def test_append_none_ignores_separator(self, test_file):
        create_file(test_file, "X")
        append_to_file(test_file, None, True)
        assert read_file(test_file) == "X"

    def test_append_lines(self, test_file):
        create_file(test_file, "X")
        append_lines(test_file, ["a", "b"], True)
        assert read_file(test_file) == "X" + NEW_LINE + "a" + NEW_LINE + "b"

    def test_append_lines_none(self, test_file):
        create_file(test_file, "X")
        append_lines(test_file, None, True)
        assert read_file(test_file) == "X"

    def test_append_does_not_create(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            append_to_file(temp_dir / "missing.txt", "abc")
        assert not exists(temp_dir / "missing.txt")


class TestMoveCopy:
    """Test rename, move, copy, truncate and delete."""

    def test_rename(self, test_file):
        new_path = rename_file(str(test_file), "test2.txt")
        assert new_path == test_file.parent / "test2.txt"
        assert exists(new_path)
        assert not exists(test_file)

    def test_rename_overwrites(self, temp_dir):
        source = create_file(temp_dir / "a.txt", "new")
        create_file(temp_dir / "b.txt", "old")
        rename_file(source, "b.txt")
        assert read_file(temp_dir / "b.txt") == "new"

    def test_move_overwrites(self, temp_dir):
        source = create_file(temp_dir / "a.txt", "new")
        target = create_file(temp_dir / "b.txt", "old")
        assert move_file(source, target) == target
        assert read_file(target) == "new"
        assert not exists(source)

    def test_move_across_file_systems(self, temp_dir, monkeypatch):
        def cross_device(src, dst):
            raise OSError(errno.EXDEV, "Invalid cross-device link")

        monkeypatch.setattr(os, "replace", cross_device)
        source = create_file(temp_dir / "a.txt", "new")
        target = create_file(temp_dir / "b.txt", "old")

        assert move_file(source, target) == target
        assert read_file(target) == "new"
        assert not exists(source)

    def test_move_directory_across_file_systems(self, temp_dir, monkeypatch):
        def cross_device(src, dst):
            raise OSError(errno.EXDEV, "Invalid cross-device link")

        monkeypatch.setattr(os, "replace", cross_device)
        source = temp_dir / "src_dir"
        source.mkdir()
        create_file(source / "child.txt", "hello")

        target = move_file(source, temp_dir / "dst_dir")

        assert read_file(target / "child.txt") == "hello"
        assert not exists(source)

    def test_move_missing_source(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            move_file(temp_dir / "missing.txt", temp_dir / "b.txt")

    def test_copy_then_delete(self, temp_dir):
        f = create_file(temp_dir / "f", "hello")
        g = copy_file(f, temp_dir / "g")
        assert read_file(f) == read_file(g) == "hello"
        delete_file(f)
        assert exists(f) is False
        assert exists(g) is True

    def test_copy_overwrites(self, temp_dir):
        source = create_file(temp_dir / "a.txt", "new")
        target = create_file(temp_dir / "b.txt", "older content")
        copy_file(source, target)
        assert read_file(target) == "new"
        assert read_file(source) == "new"

    def test_truncate_is_idempotent(self, test_file):
        create_file(test_file, "content")
        truncate_file(test_file)
        assert read_file(test_file) == ""
        truncate_file(test_file)
        assert read_file(test_file) == ""
        assert exists(test_file)

    def test_truncate_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            truncate_file(temp_dir / "missing.txt")

    def test_delete_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            delete_file(temp_dir / "missing.txt")

    def test_delete_empty_directory(self, temp_dir):
        sub = temp_dir / "sub"
        sub.mkdir()
        delete_file(sub)
        assert not exists(sub)

    def test_delete_non_empty_directory(self, temp_dir):
        sub = temp_dir / "sub"
        sub.mkdir()
        (sub / "child.txt").touch()
        with pytest.raises(OSError):
            delete_file(sub)
        assert exists(sub)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
