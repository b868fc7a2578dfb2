"""Unit tests for column type reconciliation."""

import pytest

from csv_matrix.domain.entities.table import ElementaryType
from csv_matrix.domain.services.column_types import reconcile_column_types
from csv_matrix.domain.services.type_classifier import make_field

NUMERIC = ElementaryType.NUMERIC
TEXT = ElementaryType.TEXT


def _rows(*values: tuple[str, ...]):
    return [tuple(make_field(value) for value in row) for row in values]


class TestReconcileColumnTypes:
    """Test suite for reconcile_column_types."""

    def test_no_rows_gives_empty_vector(self):
        assert reconcile_column_types([]) == ()

    def test_all_numeric_column_is_numeric(self):
        rows = _rows(("1", "a"), ("2.5", "b"))

        assert reconcile_column_types(rows) == (NUMERIC, TEXT)

    def test_text_in_later_row_makes_column_text(self):
        """Row 0 being Numeric does not decide the column."""
        rows = _rows(("1",), ("2",), ("x",))

        assert reconcile_column_types(rows) == (TEXT,)

    def test_text_in_first_row_only_makes_column_text(self):
        rows = _rows(("x",), ("1",), ("2",))

        assert reconcile_column_types(rows) == (TEXT,)

    def test_columns_are_decided_independently(self):
        rows = _rows(("1", "a", "3"), ("2", "4", "b"), ("3", "5", "6"))

        assert reconcile_column_types(rows) == (NUMERIC, TEXT, TEXT)

    def test_empty_cells_count_as_numeric(self):
        rows = _rows(("",), ("1",))

        assert reconcile_column_types(rows) == (NUMERIC,)

    def test_column_type_matches_full_scan(self):
        rows = _rows(("1", "a"), ("x", "2"), ("3", "4"))
        types = reconcile_column_types(rows)

        for index, column_type in enumerate(types):
            has_text = any(row[index].type is TEXT for row in rows)
            assert (column_type is NUMERIC) == (not has_text)

    def test_short_row_is_rejected(self):
        rows = _rows(("1", "2"), ("3",))

        with pytest.raises(ValueError, match="row 1 has 1 fields, expected 2"):
            reconcile_column_types(rows)
