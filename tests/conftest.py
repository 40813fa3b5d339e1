"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import os
from typing import Any, Optional

import pytest


@pytest.fixture(scope="session")
def database_url() -> Optional[str]:
    """
    Provide database URL for integration tests.

    Integration tests delete every row in jobs and companies, so they only
    run against JOBBOARD_TEST_DATABASE_URL, never against DATABASE_URL.

    Scope: session (created once per test run)

    Returns:
        str: PostgreSQL connection URL, or None when not configured
    """
    return os.getenv("JOBBOARD_TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_jobs() -> list[dict[str, Any]]:
    """
    Provide two job rows as the store returns them.

    Scope: function (created fresh for each test)

    Returns:
        list[dict]: Job rows ordered by company_handle, title
    """
    return [
        {
            "id": 1,
            "title": "job1",
            "salary": 1,
            "equity": "0.1",
            "company_handle": "c1",
        },
        {
            "id": 2,
            "title": "job2",
            "salary": 2,
            "equity": "0.2",
            "company_handle": "c2",
        },
    ]


class RecordingDB:
    """
    Stub query collaborator.

    Returns queued results in order and records every (sql, values) call.
    An empty queue answers with no rows.
    """

    def __init__(self, *results: list[dict[str, Any]]):
        self.results = list(results)
        self.calls: list[tuple[str, list[Any]]] = []

    def query(self, sql_text: str, values=()) -> list[dict[str, Any]]:
        self.calls.append((sql_text, list(values)))
        if self.results:
            return self.results.pop(0)
        return []


@pytest.fixture
def recording_db():
    """Factory for RecordingDB stubs with queued results."""
    return RecordingDB


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
