"""Unit tests for the Table retrieval surface."""

import pytest

from csv_matrix.domain.entities.table import ElementaryType, Field, Table


def _table(header=()):
    rows = (
        (Field("alice", ElementaryType.TEXT), Field("10", ElementaryType.NUMERIC)),
        (Field("bob", ElementaryType.TEXT), Field("12", ElementaryType.NUMERIC)),
    )
    return Table(
        header=header,
        rows=rows,
        column_types=(ElementaryType.TEXT, ElementaryType.NUMERIC),
    )


class TestTable:
    def test_counts(self):
        table = _table(("name", "score"))

        assert table.row_count == 2
        assert table.column_count == 2
        assert len(table) == 2

    def test_column_names_use_header(self):
        assert _table(("name", "score")).column_names == ["name", "score"]

    def test_column_names_are_positional_without_header(self):
        assert _table().column_names == ["0", "1"]

    def test_column_values(self):
        table = _table()

        assert table.column_values(0) == ["alice", "bob"]
        assert table.column_values(1) == ["10", "12"]

    def test_column_values_out_of_range(self):
        with pytest.raises(IndexError):
            _table().column_values(2)

    def test_iterates_rows_in_order(self):
        names = [row[0].value for row in _table()]

        assert names == ["alice", "bob"]

    def test_header_only_table(self):
        table = Table(header=("a", "b"))

        assert table.row_count == 0
        assert table.column_count == 2
        assert table.column_types == ()

    def test_table_is_immutable(self):
        table = _table()

        with pytest.raises(AttributeError):
            table.header = ("x",)

    def test_elementary_type_values(self):
        assert ElementaryType.NUMERIC.value == "Numeric"
        assert ElementaryType("Text") is ElementaryType.TEXT
        assert Field("1", ElementaryType.NUMERIC).is_numeric
