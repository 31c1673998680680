"""Tests for the bookshelf CLI."""

import json

from click.testing import CliRunner

from bookshelf import __version__
from bookshelf.cli import cli


def write_fixtures(directory, books):
    (directory / "authors.json").write_text(
        json.dumps([{"id": 1, "firstName": "A", "lastName": "B", "biography": "C"}])
    )
    (directory / "books.json").write_text(json.dumps(books))
    (directory / "comments.json").write_text("[]")


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_data_bundled_fixtures():
    result = CliRunner().invoke(cli, ["check-data"])

    assert result.exit_code == 0, result.output
    assert "No issues found" in result.output


def test_check_data_reports_dangling_reference(tmp_path):
    write_fixtures(
        tmp_path,
        [{"id": 5, "author": 9, "name": "N", "postDate": "2020", "description": "D"}],
    )

    result = CliRunner().invoke(cli, ["check-data", "--data-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "book 5 references missing author 9" in result.output


def test_check_data_strict_fails_on_findings(tmp_path):
    write_fixtures(
        tmp_path,
        [{"id": 5, "author": 9, "name": "N", "postDate": "2020", "description": "D"}],
    )

    result = CliRunner().invoke(
        cli, ["check-data", "--data-dir", str(tmp_path), "--strict", "--output-format", "json"]
    )

    assert result.exit_code == 1
    assert '"dangling_reference"' in result.output


def test_check_data_missing_directory(tmp_path):
    result = CliRunner().invoke(cli, ["check-data", "--data-dir", str(tmp_path / "missing")])

    assert result.exit_code == 1
