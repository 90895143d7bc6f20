"""Tests for target sources."""

import io

import pytest
from bulk_resolve.sources import read_lines, stream_lines, targets_from_argument


class TestSources:
    """Test cases for choosing and reading target sources."""

    def test_file_argument(self, tmp_path):
        """Test that an existing file is read into a list."""
        targets = tmp_path / "targets.txt"
        targets.write_text("example.com\n  8.8.8.8  \n\nexample.org\n")
        assert targets_from_argument(str(targets)) == ["example.com", "8.8.8.8", "example.org"]

    def test_literal_argument(self):
        """Test that a non-file argument is a single target."""
        assert targets_from_argument("example.com") == ["example.com"]
        assert targets_from_argument("8.8.8.8") == ["8.8.8.8"]

    def test_directory_is_a_literal(self, tmp_path):
        """Test that only regular files are read."""
        assert targets_from_argument(str(tmp_path)) == [str(tmp_path)]

    def test_stdin_is_lazy(self):
        """Test that stream input is not read up front."""
        stream = io.StringIO("a.example\n\nb.example\n")
        targets = targets_from_argument(None, stdin=stream)
        assert not isinstance(targets, list)
        assert list(targets) == ["a.example", "b.example"]

    def test_stream_lines_trims(self):
        assert list(stream_lines(io.StringIO(" a.example \r\n"))) == ["a.example"]

    def test_undecodable_file(self, tmp_path):
        """Test that a file that is not UTF-8 is a read error."""
        targets = tmp_path / "targets.bin"
        targets.write_bytes(b"\xff\xfe\xfa\n")
        with pytest.raises(UnicodeDecodeError):
            read_lines(str(targets))
