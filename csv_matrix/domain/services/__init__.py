from .column_types import reconcile_column_types
from .field_splitter import split_fields
from .type_classifier import classify, is_numeric, make_field

__all__ = [
    "classify",
    "is_numeric",
    "make_field",
    "reconcile_column_types",
    "split_fields",
]
