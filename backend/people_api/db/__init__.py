"""Database Infrastructure — declarative Base, audit columns, and session factory helper.

Invariants:
    - Single async engine per application (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite by default, asyncpg for PostgreSQL (ADR: native async, no thread pool overhead)
"""
