"""
Jobs

Repository and search helpers for the jobs table.

Key responsibilities:
- Create jobs while rejecting duplicate (title, company_handle) pairs
- List jobs with title/salary/equity filters, ordered by company then title
- Get, partially update and delete jobs by id
"""

from .db_operations import JobDB
from .filters import JobFilter, build_where_clause

__all__ = ["JobDB", "JobFilter", "build_where_clause"]
