from ...constants import Defaults


def split_fields(
    line: str,
    *,
    delimiter: str = Defaults.DELIMITER,
    quote_char: str = Defaults.QUOTE_CHAR,
) -> list[str]:
    """Split one physical line into raw field strings.

    The quote character toggles between the unquoted and quoted states and is
    never part of the output; inside quotes the delimiter is kept literally.
    Quoting may start anywhere within a field, so ``ab"c,d"e`` is one field
    ``abc,de``. There is no escape for the quote character.

    The buffer left at end of line is emitted only when it is non-empty, so a
    line ending on the delimiter has no trailing empty field and an empty line
    has no fields at all.
    """
    fields: list[str] = []
    buffer: list[str] = []
    quoted = False
    for char in line:
        if quoted:
            if char == quote_char:
                quoted = False
            else:
                buffer.append(char)
        elif char == delimiter:
            fields.append("".join(buffer))
            buffer.clear()
        elif char == quote_char:
            quoted = True
        else:
            buffer.append(char)
    if buffer:
        fields.append("".join(buffer))
    return fields
