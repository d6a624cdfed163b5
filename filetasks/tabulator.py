"""
Tabulate heterogeneous JSON records into CSV text.

Records may carry different field sets. The header is the union of every
field name, ordered by first appearance while scanning records in sequence,
and fields a record lacks render as empty cells.

Values are written unescaped: a value containing a comma or a newline will
shift columns when the CSV is read back.
"""

import json
import math
from decimal import Decimal


DELIMITER = ","
LINE_TERMINATOR = "\n"


class ConversionError(Exception):
    """Base class for JSON to CSV conversion failures."""


class EmptyInputError(ConversionError):
    """Raised when there are no records to tabulate."""


class Table:
    """Header plus rectangular rows of rendered cells."""

    def __init__(self, header, rows):
        self.header = list(header)
        self.rows = [list(row) for row in rows]

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return self.header == other.header and self.rows == other.rows

    def __repr__(self):
        return f"Table(header={self.header!r}, rows={self.rows!r})"


def derive_header(records):
    """
    Collect field names in first-seen order across all records.

    :param records: Sequence of record mappings.
    :returns: List of unique field names; empty when ``records`` is empty.
    """

    seen = {}
    for record in records:
        for field in record:
            seen.setdefault(field, None)
    return list(seen)


def _format_float(value: float) -> str:
    """
    Render a finite float the way a JSON number prints in JavaScript.

    Positional notation is used for magnitudes in ``[1e-6, 1e21)``, exponent
    notation otherwise, with no leading zeros in the exponent.
    """

    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    decimal = Decimal(repr(abs(value))).normalize()
    _, digit_tuple, exponent = decimal.as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    length = len(digits)
    point = exponent + length

    if length <= point <= 21:
        text = digits + "0" * (point - length)
    elif 0 < point <= 21:
        text = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits if length == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text


def stringify_value(value) -> str:
    """
    Render one field value as CSV cell text.

    :param value: Parsed JSON value.
    :returns: ``""`` for None, ``true``/``false`` for booleans, canonical
        number text, strings unchanged, compact JSON for nested values.
    """

    if value is None:
        return ""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        return _format_float(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def tabulate(records) -> Table:
    """
    Build a rectangular table from a non-empty record sequence.

    :param records: Sequence of record mappings, in output row order.
    :raises EmptyInputError: If ``records`` is empty.
    :returns: :class:`Table` whose rows all have ``len(header)`` cells.
    """

    if not records:
        raise EmptyInputError("No records to convert.")

    header = derive_header(records)
    rows = []
    for record in records:
        rows.append(
            [
                stringify_value(record[field]) if field in record else ""
                for field in header
            ]
        )
    return Table(header, rows)


def render(table: Table) -> str:
    """
    Serialize a table as delimiter-joined lines.

    :param table: Table produced by :func:`tabulate`.
    :returns: CSV text with a trailing newline after the last row.
    """

    lines = [DELIMITER.join(table.header)]
    lines.extend(DELIMITER.join(row) for row in table.rows)
    return "".join(line + LINE_TERMINATOR for line in lines)
