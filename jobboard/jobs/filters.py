"""
Filter-clause builder for job searches.

Turns a JobFilter into a WHERE fragment with $n placeholders and the values
to bind to them. Every value is bound as a parameter.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass
class JobFilter:
    """
    Search criteria for jobs. Unset fields impose no constraint.

    title_like: case-insensitive substring of the title
    min_salary: salary must be >= this value (0 is a real threshold)
    has_equity: True restricts to equity > 0; False or None imposes nothing
    """

    title_like: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None

    @classmethod
    def from_dict(cls, criteria: Mapping[str, Any]) -> "JobFilter":
        """Create JobFilter from a mapping using the field names above."""
        unknown = set(criteria) - {"title_like", "min_salary", "has_equity"}
        if unknown:
            raise ValueError(f"Unknown filter fields: {', '.join(sorted(unknown))}")
        return cls(
            title_like=criteria.get("title_like"),
            min_salary=criteria.get("min_salary"),
            has_equity=criteria.get("has_equity"),
        )


def build_where_clause(
    filters: Union[JobFilter, Mapping[str, Any], None],
    start_index: int = 1,
) -> tuple[str, list[Any]]:
    """
    Build a WHERE clause for the given job filter.

    Args:
        filters: JobFilter, a mapping with the same keys, or None
        start_index: Number of the first placeholder to use

    Returns:
        Tuple of (clause, values). clause is "" when nothing is filtered,
        otherwise it starts with " WHERE ". Conditions are AND-combined.

    Example:
        >>> build_where_clause(JobFilter(title_like="eng", min_salary=50000))
        (' WHERE title ILIKE $1 AND salary >= $2', ['%eng%', 50000])
    """
    if filters is None:
        filters = JobFilter()
    elif not isinstance(filters, JobFilter):
        filters = JobFilter.from_dict(filters)

    conditions = []
    values: list[Any] = []
    index = start_index

    if filters.title_like is not None:
        conditions.append(f"title ILIKE ${index}")
        values.append(f"%{filters.title_like}%")
        index += 1

    if filters.min_salary is not None:
        conditions.append(f"salary >= ${index}")
        values.append(filters.min_salary)
        index += 1

    if filters.has_equity:
        conditions.append("equity > 0")

    if not conditions:
        return "", values

    return " WHERE " + " AND ".join(conditions), values
