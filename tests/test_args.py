"""Tests for command-line argument validation."""

import pytest

from mdreader.args import (
    EmptyPath,
    InvalidPathArgument,
    NoArguments,
    TooManyArguments,
    UnknownFlag,
    is_valid_path,
    parse_arguments,
)


class TestIsValidPath:
    def test_simple_filenames(self):
        assert is_valid_path("README.md") is True
        assert is_valid_path("test.MD") is True

    def test_directory_paths(self):
        assert is_valid_path("docs/guide.md") is True
        assert is_valid_path("./README.md") is True
        assert is_valid_path("../parent/file.md") is True
        assert is_valid_path("/absolute/path/file.md") is True

    def test_special_paths(self):
        assert is_valid_path(".") is True
        assert is_valid_path("..") is True
        assert is_valid_path("../") is True

    def test_blank(self):
        assert is_valid_path("") is False
        assert is_valid_path("   ") is False
        assert is_valid_path("\t") is False

    @pytest.mark.parametrize("char", ["\0", "<", ">", ":", '"', "|", "?", "*"])
    def test_reserved_characters(self, char):
        assert is_valid_path(f"file{char}.md") is False


class TestParseArguments:
    def test_single_path(self):
        assert parse_arguments(["notes.md"]) == "notes.md"

    def test_path_returned_unmodified(self):
        assert parse_arguments(["  spaced name.md"]) == "  spaced name.md"

    def test_no_arguments(self):
        assert parse_arguments([]) == NoArguments()

    def test_empty_path(self):
        assert parse_arguments([""]) == EmptyPath()

    def test_whitespace_path(self):
        assert parse_arguments(["   "]) == EmptyPath()

    def test_invalid_characters(self):
        assert parse_arguments(["bad<path.md"]) == InvalidPathArgument("bad<path.md")

    def test_unknown_long_flag(self):
        assert parse_arguments(["--unknown"]) == UnknownFlag("--unknown")

    def test_unknown_short_flag(self):
        assert parse_arguments(["-x"]) == UnknownFlag("-x")

    def test_lone_dash_is_a_flag(self):
        assert parse_arguments(["-"]) == UnknownFlag("-")

    def test_dash_prefixed_name_is_a_flag(self):
        assert parse_arguments(["-notes.md"]) == UnknownFlag("-notes.md")

    def test_dash_prefixed_name_with_dot_slash(self):
        assert parse_arguments(["./-notes.md"]) == "./-notes.md"

    def test_too_many(self):
        assert parse_arguments(["a.md", "b.md"]) == TooManyArguments(2)

    def test_flag_checked_before_count(self):
        assert parse_arguments(["--nope", "a.md"]) == UnknownFlag("--nope")


class TestParseErrorMessages:
    def test_no_arguments(self):
        assert NoArguments().message == "No arguments provided"

    def test_empty_path(self):
        assert EmptyPath().message == "File path cannot be empty"

    def test_invalid_path(self):
        assert InvalidPathArgument("a|b.md").message == "Invalid file path: 'a|b.md'"

    def test_unknown_flag(self):
        assert str(UnknownFlag("--foo")) == "Unknown flag: '--foo'"

    def test_too_many(self):
        assert TooManyArguments(3).message == (
            "Too many arguments: expected 1 file path, got 3"
        )
