"""Infrastructure — database session management, SQL repository, logging.

Invariants:
    - All IO with the database lives in this package
    - asyncpg driver for PostgreSQL, aiosqlite for local development and tests
"""
