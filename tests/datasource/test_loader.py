"""Tests for the JSON fixture loader."""

import json

import pytest

from bookshelf.catalog.errors import DataSourceUnavailable
from bookshelf.config import BUNDLED_DATA_DIR
from bookshelf.datasource import Author, Book, Comment, load_data_source


def write_fixtures(directory, authors=None, books=None, comments=None):
    for name, records in (
        ("authors.json", authors if authors is not None else []),
        ("books.json", books if books is not None else []),
        ("comments.json", comments if comments is not None else []),
    ):
        (directory / name).write_text(json.dumps(records), encoding="utf-8")


class TestLoadDataSource:
    """Tests for load_data_source."""

    def test_loads_camel_case_records(self, tmp_path):
        write_fixtures(
            tmp_path,
            authors=[{"id": 1, "firstName": "A", "lastName": "B", "biography": "C"}],
            books=[
                {"id": 2, "author": 1, "name": "N", "postDate": "2020-01-01", "description": "D"}
            ],
            comments=[{"id": 3, "bookId": 2, "name": "R", "comment": "Nice"}],
        )

        data_source = load_data_source(tmp_path)

        assert data_source.authors == (
            Author(id=1, first_name="A", last_name="B", biography="C"),
        )
        assert data_source.books[0].post_date == "2020-01-01"
        assert data_source.comments == (Comment(id=3, book_id=2, name="R", comment="Nice"),)

    def test_collections_are_immutable(self, tmp_path):
        write_fixtures(tmp_path)
        data_source = load_data_source(tmp_path)

        assert isinstance(data_source.authors, tuple)
        assert isinstance(data_source.books, tuple)
        assert isinstance(data_source.comments, tuple)

    def test_records_are_frozen(self, tmp_path):
        write_fixtures(
            tmp_path,
            books=[{"id": 2, "author": 1, "name": "N", "postDate": "x", "description": "D"}],
        )
        book = load_data_source(tmp_path).books[0]

        with pytest.raises(Exception):
            book.name = "Changed"

    def test_extra_fields_ignored(self, tmp_path):
        write_fixtures(
            tmp_path,
            authors=[
                {"id": 1, "firstName": "A", "lastName": "B", "biography": "C", "avatar": "x.png"}
            ],
        )
        assert load_data_source(tmp_path).authors[0].id == 1

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DataSourceUnavailable, match="does not exist"):
            load_data_source(tmp_path / "nope")

    def test_missing_file(self, tmp_path):
        write_fixtures(tmp_path)
        (tmp_path / "comments.json").unlink()

        with pytest.raises(DataSourceUnavailable, match="comments.json"):
            load_data_source(tmp_path)

    def test_invalid_json(self, tmp_path):
        write_fixtures(tmp_path)
        (tmp_path / "books.json").write_text("[{not json", encoding="utf-8")

        with pytest.raises(DataSourceUnavailable, match="Invalid Book records"):
            load_data_source(tmp_path)

    def test_record_missing_field(self, tmp_path):
        write_fixtures(tmp_path, authors=[{"id": 1, "firstName": "A"}])

        with pytest.raises(DataSourceUnavailable, match="Invalid Author records"):
            load_data_source(tmp_path)

    def test_bundled_fixtures_load(self):
        data_source = load_data_source(BUNDLED_DATA_DIR)

        assert len(data_source.authors) > 0
        assert len(data_source.books) > 0
        assert len(data_source.comments) > 0
        assert all(isinstance(b, Book) for b in data_source.books)
