"""
Database Operations for Jobs

This module handles all database interactions for job records:
- Creating jobs, with a duplicate check on (title, company_handle)
- Listing jobs with optional title/salary/equity filters
- Fetching, partially updating and deleting single jobs

Queries are run through an injected query collaborator (see
jobboard.common.db.Database), so the repository holds no connection state.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Union

from ..common.db import QueryExecutor
from ..common.errors import DuplicateEntityError, NotFoundError
from ..common.sql import sql_for_partial_update
from .filters import JobFilter, build_where_clause

logger = logging.getLogger(__name__)

JOB_COLUMNS = """
    id,
    title,
    salary,
    equity,
    company_handle"""


def _to_job(row: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a row into a job dict, rendering numeric equity as text."""
    job = dict(row)
    equity = job.get("equity")
    if isinstance(equity, (Decimal, float, int)):
        job["equity"] = str(equity)
    return job


class JobDB:
    """
    Repository for the jobs table.

    This class provides methods to:
    - Create a job (rejecting duplicates)
    - Find all jobs, optionally filtered
    - Get, update and remove a job by id
    """

    def __init__(self, db: QueryExecutor):
        """
        Args:
            db: Query collaborator with query(sql_text, values) -> rows
        """
        self.db = db

    def create(
        self,
        title: str,
        salary: Optional[int],
        equity: Any,
        company_handle: str,
    ) -> dict[str, Any]:
        """
        Create a job and return it.

        Args:
            title: Job title
            salary: Salary or None
            equity: Equity fraction in [0, 1] or None
            company_handle: Handle of the owning company

        Returns:
            Dict with id, title, salary, equity, company_handle

        Raises:
            DuplicateEntityError: If a job with the same title already exists
                                  at the same company
        """
        duplicate_check = self.db.query(
            """
            SELECT 1
            FROM jobs
            WHERE title = $1
                AND company_handle = $2
            """,
            [title, company_handle],
        )
        if duplicate_check:
            raise DuplicateEntityError(
                f"Duplicate job with title: {title} at company: {company_handle}"
            )

        rows = self.db.query(
            f"""
            INSERT INTO jobs (
                title,
                salary,
                equity,
                company_handle
            ) VALUES (
                $1, $2, $3, $4
            ) RETURNING {JOB_COLUMNS}
            """,
            [title, salary, equity, company_handle],
        )
        job = _to_job(rows[0])

        logger.info(
            "Created job",
            extra={"job_id": job["id"], "company_handle": company_handle},
        )
        return job

    def find_all(
        self,
        filters: Union[JobFilter, Mapping[str, Any], None] = None,
    ) -> list[dict[str, Any]]:
        """
        Find all jobs, optionally filtered.

        Args:
            filters: JobFilter or a mapping with any of title_like,
                     min_salary, has_equity. None returns every job.

        Returns:
            List of job dicts ordered by company_handle, then title.
            Empty list if nothing matches.

        Example:
            >>> jobs = JobDB(db).find_all({"title_like": "engineer"})
        """
        where_clause, values = build_where_clause(filters)
        select_query = (
            f"SELECT {JOB_COLUMNS}\n"
            f"FROM jobs{where_clause}\n"
            "ORDER BY company_handle, title"
        )
        rows = self.db.query(select_query, values)

        logger.debug("Fetched jobs", extra={"count": len(rows)})
        return [_to_job(row) for row in rows]

    def get(self, job_id: int) -> dict[str, Any]:
        """
        Get a job by id.

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.db.query(
            f"""
            SELECT {JOB_COLUMNS}
            FROM jobs
            WHERE id = $1
            """,
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        return _to_job(rows[0])

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Partially update a job.

        Only the fields present in data change. None clears salary or equity.
        This does not guard id or company_handle; the API layer strips those.

        Args:
            job_id: Id of the job to update
            data: Any of title, salary, equity

        Returns:
            The updated job dict

        Raises:
            InvalidInputError: If data is empty
            NotFoundError: If no job has this id
        """
        partial = sql_for_partial_update(data, {})
        id_placeholder = f"${len(partial.values) + 1}"

        rows = self.db.query(
            f"""
            UPDATE jobs
            SET {partial.set_clause}
            WHERE id = {id_placeholder}
            RETURNING {JOB_COLUMNS}
            """,
            [*partial.values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info(
            "Updated job",
            extra={"job_id": job_id, "fields": list(data)},
        )
        return _to_job(rows[0])

    def remove(self, job_id: int) -> None:
        """
        Delete a job.

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.db.query(
            """
            DELETE FROM jobs
            WHERE id = $1
            RETURNING id
            """,
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info("Removed job", extra={"job_id": job_id})
