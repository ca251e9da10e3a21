"""Person Repository — SQLAlchemy implementation of the PersonRepository protocol.

Invariants:
    - Every call runs under a deadline (asyncio.timeout); expiry → DatabaseTimeoutError
    - Every SQLAlchemy failure rolls back and surfaces as DatabaseError, never None
    - A missing or soft-deleted id surfaces as ResourceNotFoundError
    - create() ignores identity entirely: the store assigns id and audit columns
    - replace() overwrites every client field (whole-record replace), then saves

Design Decisions:
    - Repository owns the session passed in by the route dependency: one per request
    - list() ordered by id so repeated calls are stable for clients and tests
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from people_api.core.domain_types import PersonId
from people_api.core.errors import (
    DatabaseError, DatabaseTimeoutError, ResourceNotFoundError,
)
from people_api.models.person import Person

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class SqlPersonRepository:
    """Person persistence over an AsyncSession."""

    def __init__(
        self, db: AsyncSession, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._db = db
        self._timeout = timeout_seconds

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Apply the deadline and map store failures for one operation."""
        try:
            async with asyncio.timeout(self._timeout):
                yield
        except TimeoutError:
            await self._db.rollback()
            logger.error(f"DB {operation} timed out after {self._timeout}s")
            raise DatabaseTimeoutError(operation, self._timeout)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"DB {operation} failed: {e}")
            raise DatabaseError("Database operation failed", operation) from e

    async def list_all(self) -> list[Person]:
        async with self._guard("list"):
            result = await self._db.execute(
                select(Person)
                .where(Person.deleted_at.is_(None))
                .order_by(Person.id),
            )
            return list(result.scalars().all())

    async def get(self, person_id: PersonId) -> Person:
        async with self._guard("get"):
            person = await self._find(person_id)
        if person is None:
            raise ResourceNotFoundError("Person", person_id)
        return person

    async def create(self, name: str, age: int, height: int) -> Person:
        person = Person(name=name, age=age, height=height)
        async with self._guard("create"):
            self._db.add(person)
            await self._db.commit()
            await self._db.refresh(person)
        logger.info("Person created", extra={"person_id": person.id})
        return person

    async def replace(
        self, person_id: PersonId, name: str, age: int, height: int,
    ) -> Person:
        person = await self.get(person_id)
        person.name = name
        person.age = age
        person.height = height
        async with self._guard("update"):
            await self._db.commit()
            await self._db.refresh(person)
        logger.info("Person updated", extra={"person_id": person.id})
        return person

    async def _find(self, person_id: PersonId) -> Person | None:
        result = await self._db.execute(
            select(Person).where(
                Person.id == person_id, Person.deleted_at.is_(None),
            ),
        )
        return result.scalar_one_or_none()
