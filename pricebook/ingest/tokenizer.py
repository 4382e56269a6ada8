"""
Row Tokenizer

Splits one line of a CSV export into trimmed field strings.

Quoting rules:
- A double quote toggles the quoted state.
- Inside a quoted region, a doubled quote ("") is one literal quote.
- Commas inside a quoted region are part of the field.
- An unterminated quote runs to the end of the line.

The tokenizer never raises and never enforces a field count.
"""

import csv
import io
from typing import Iterable, List

QUOTE = '"'
DELIMITER = ','


def tokenize_row(line: str) -> List[str]:
    """
    Split a single CSV line into fields.

    Args:
        line: One line of text, without its line terminator

    Returns:
        List of whitespace-trimmed fields; always at least one element

    Example:
        >>> tokenize_row('a,"b,c", d')
        ['a', 'b,c', 'd']
        >>> tokenize_row('x,"5"" pipe",y')
        ['x', '5" pipe', 'y']
    """
    fields = []
    buffer = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                buffer.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(''.join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)
        i += 1

    fields.append(''.join(buffer).strip())
    return fields


def format_row(fields: Iterable[str]) -> str:
    """
    Join fields into one CSV line, quoting fields that need it.

    Fields containing a comma or quote are wrapped in quotes with inner
    quotes doubled, so tokenize_row(format_row(fields)) == fields for
    already-trimmed fields.
    """
    out = io.StringIO()
    writer = csv.writer(out, delimiter=DELIMITER, quotechar=QUOTE, lineterminator='')
    writer.writerow(fields)
    return out.getvalue()
