from ...constants import Tokens
from ..entities.table import ElementaryType, Field


def is_numeric(value: str) -> bool:
    # Vacuously true for the empty string.
    dots = 0
    for char in value:
        if char == Tokens.DECIMAL_POINT:
            dots += 1
            if dots > 1:
                return False
        elif char not in Tokens.DIGITS:
            return False
    return True


def classify(value: str) -> ElementaryType:
    if is_numeric(value):
        return ElementaryType.NUMERIC
    return ElementaryType.TEXT


def make_field(value: str) -> Field:
    return Field(value=value, type=classify(value))
