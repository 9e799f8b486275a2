"""Unit tests for smallsh.parser."""

import pytest

from smallsh.errors import ParseValidationError
from smallsh.parser import build_command_spec, is_blank_or_comment


class TestBlankAndComment:
    def test_empty_line_is_ignored(self):
        assert build_command_spec("") is None

    def test_whitespace_only_line_is_ignored(self):
        assert build_command_spec("   \t\n") is None

    def test_comment_is_ignored(self):
        assert build_command_spec("# a comment") is None

    def test_indented_comment_is_ignored(self):
        assert is_blank_or_comment("   # still a comment") is True

    def test_hash_inside_command_is_not_a_comment(self):
        assert is_blank_or_comment("echo #notacomment") is False


class TestBuildCommandSpec:
    def test_plain_command(self):
        spec = build_command_spec("ls -la /tmp\n")
        assert spec.argv == ["ls", "-la", "/tmp"]
        assert spec.input_redirect is None
        assert spec.output_redirect is None
        assert spec.background is False

    def test_input_and_output_redirects(self):
        spec = build_command_spec("wc < in.txt > out.txt")
        assert spec.argv == ["wc"]
        assert spec.input_redirect == "in.txt"
        assert spec.output_redirect == "out.txt"
        assert spec.background is False

    def test_redirects_may_precede_arguments(self):
        spec = build_command_spec("sort > sorted.txt -r")
        assert spec.argv == ["sort", "-r"]
        assert spec.output_redirect == "sorted.txt"

    def test_trailing_ampersand_sets_background(self):
        spec = build_command_spec("sleep 2 &")
        assert spec.argv == ["sleep", "2"]
        assert spec.background is True
        assert spec.input_redirect is None
        assert spec.output_redirect is None

    def test_ampersand_mid_line_stops_parsing(self):
        spec = build_command_spec("sleep 5 & > ignored.txt extra")
        assert spec.argv == ["sleep", "5"]
        assert spec.background is True
        assert spec.output_redirect is None

    def test_repeated_redirect_keeps_last(self):
        spec = build_command_spec("cat > a.txt > b.txt")
        assert spec.output_redirect == "b.txt"

    def test_ampersand_attached_to_word_is_ordinary(self):
        spec = build_command_spec("echo a&")
        assert spec.argv == ["echo", "a&"]
        assert spec.background is False

    def test_program_is_first_argument(self):
        assert build_command_spec("git status").program == "git"


class TestValidation:
    def test_missing_output_filename(self):
        with pytest.raises(ParseValidationError, match="missing filename for redirection"):
            build_command_spec("ls >")

    def test_missing_input_filename(self):
        with pytest.raises(ParseValidationError, match="missing filename for redirection"):
            build_command_spec("cat <")

    def test_operator_is_not_a_filename(self):
        with pytest.raises(ParseValidationError, match="missing filename"):
            build_command_spec("cat > &")

    def test_redirect_without_command(self):
        with pytest.raises(ParseValidationError, match="missing command"):
            build_command_spec("< in.txt")

    def test_line_too_long(self):
        with pytest.raises(ParseValidationError, match="too long"):
            build_command_spec("echo " + "x" * 20, max_line_length=10)

    def test_too_many_arguments(self):
        with pytest.raises(ParseValidationError, match="too many arguments"):
            build_command_spec("echo a b c", max_args=3)

    def test_argument_limit_is_inclusive(self):
        assert build_command_spec("echo a b", max_args=3).argv == ["echo", "a", "b"]

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            build_command_spec("ls >")
