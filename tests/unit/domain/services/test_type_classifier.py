"""Unit tests for elementary type classification."""

import pytest

from csv_matrix.domain.entities.table import ElementaryType, Field
from csv_matrix.domain.services.type_classifier import classify, is_numeric, make_field


class TestClassify:
    """Test suite for classify()."""

    @pytest.mark.parametrize("value", ["123", "12.3", "0", ".5", "5.", "007"])
    def test_numeric_values(self, value):
        assert classify(value) is ElementaryType.NUMERIC

    @pytest.mark.parametrize(
        "value",
        ["12.3.4", "abc", "-1", "+1", "1e5", "1,000", " 1", "1 ", "..", "١٢"],
    )
    def test_text_values(self, value):
        assert classify(value) is ElementaryType.TEXT

    def test_empty_string_is_numeric(self):
        """The empty string has no offending character, so it is Numeric."""
        assert classify("") is ElementaryType.NUMERIC

    def test_lone_decimal_point_is_numeric(self):
        assert classify(".") is ElementaryType.NUMERIC

    def test_is_numeric_matches_classify(self):
        assert is_numeric("42") is True
        assert is_numeric("4.2.") is False


class TestMakeField:
    def test_make_field_pairs_value_and_type(self):
        assert make_field("10") == Field("10", ElementaryType.NUMERIC)
        assert make_field("x") == Field("x", ElementaryType.TEXT)

    def test_field_is_immutable(self):
        field = make_field("10")

        with pytest.raises(AttributeError):
            field.value = "11"
