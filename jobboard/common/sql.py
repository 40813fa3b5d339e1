"""
SQL helpers for building UPDATE statements from partial data.

Values are never interpolated into SQL text. They are returned alongside the
fragment so the caller can bind them as positional parameters ($1, $2, ...).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidInputError


@dataclass
class PartialUpdate:
    """SET fragment and the values bound to its placeholders, in order."""

    set_clause: str
    values: list[Any] = field(default_factory=list)


def sql_for_partial_update(
    fields: Mapping[str, Any],
    column_aliases: Mapping[str, str],
) -> PartialUpdate:
    """
    Build the SET part of an UPDATE statement from a partial mapping.

    Args:
        fields: Field name -> new value. Only these fields are updated.
                None is a valid value (clears the column).
        column_aliases: Field name -> column name, for fields whose stored
                        column differs. Fields not listed use their own name.

    Returns:
        PartialUpdate with set_clause like '"first_name"=$1, "age"=$2'
        and values in the same order.

    Raises:
        InvalidInputError: If fields is empty

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        PartialUpdate(set_clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    if not fields:
        raise InvalidInputError("No data")

    columns = []
    values = []
    for idx, (name, value) in enumerate(fields.items(), start=1):
        column = column_aliases.get(name, name)
        columns.append(f'"{column}"=${idx}')
        values.append(value)

    return PartialUpdate(set_clause=", ".join(columns), values=values)
