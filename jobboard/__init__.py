"""Jobboard Package.

Data access and REST API for job postings tied to companies:
- common: SQL helpers, the PostgreSQL query collaborator, error types
- jobs: job repository and filter-clause builder
- api: Flask blueprint exposing the job repository over HTTP
"""

__version__ = "0.1.0"
