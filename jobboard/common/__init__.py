"""
Common utilities shared across jobboard modules.

This package is intentionally small: error types, the partial-update
clause builder and the psycopg2-backed query collaborator.
"""
