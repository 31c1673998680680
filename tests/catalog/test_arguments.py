"""Unit tests for identifier and pagination argument parsing."""

import pytest

from bookshelf.catalog.arguments import (
    CommentsArgs,
    IdArgs,
    PageArgs,
    parse_optional_integer,
    parse_required_integer,
)
from bookshelf.catalog.errors import InvalidArgument


class TestParseRequiredInteger:
    """Tests for parse_required_integer."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(1, 1), ("1", 1), ("42", 42), (" 7 ", 7), ("-3", -3), ("+5", 5), (0, 0), ("007", 7)],
    )
    def test_accepts_integers_and_numeric_strings(self, raw, expected):
        assert parse_required_integer(raw, "id") == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1.5", "1e3", "12abc", 1.0, True, []])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(InvalidArgument) as exc_info:
            parse_required_integer(raw, "id")

        assert exc_info.value.argument == "id"
        assert exc_info.value.value == raw
        assert exc_info.value.code == "BAD_USER_INPUT"

    @pytest.mark.parametrize("raw", ["١٢", "１２", "1٣", "१"])
    def test_rejects_non_ascii_digits(self, raw):
        with pytest.raises(InvalidArgument):
            parse_required_integer(raw, "id")

    def test_rejects_digit_string_past_conversion_limit(self):
        raw = "1" * 5000

        with pytest.raises(InvalidArgument, match="is too large") as exc_info:
            parse_required_integer(raw, "id")

        assert exc_info.value.argument == "id"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_message_names_argument(self):
        with pytest.raises(InvalidArgument, match="Invalid argument 'bookId'"):
            parse_required_integer("abc", "bookId")


class TestParseOptionalInteger:
    """Tests for parse_optional_integer."""

    def test_none_passes_through(self):
        assert parse_optional_integer(None, "limit") is None

    def test_parses_value(self):
        assert parse_optional_integer("3", "limit") == 3

    def test_rejects_malformed_value(self):
        with pytest.raises(InvalidArgument):
            parse_optional_integer("three", "limit")


class TestArgumentStructs:
    """Tests for the typed argument structs."""

    def test_id_args(self):
        assert IdArgs.parse("12") == IdArgs(id=12)

    def test_page_args_defaults(self):
        assert PageArgs.parse() == PageArgs(offset=None, limit=None)

    def test_page_args_parse_strings(self):
        assert PageArgs.parse("2", "5") == PageArgs(offset=2, limit=5)

    def test_page_args_reports_offending_argument(self):
        with pytest.raises(InvalidArgument) as exc_info:
            PageArgs.parse(0, "x")
        assert exc_info.value.argument == "limit"

    def test_comments_args(self):
        args = CommentsArgs.parse("5", 0, 2)
        assert args.book_id == 5
        assert args.page == PageArgs(offset=0, limit=2)

    def test_comments_args_rejects_missing_book_id(self):
        with pytest.raises(InvalidArgument) as exc_info:
            CommentsArgs.parse(None)
        assert exc_info.value.argument == "bookId"
