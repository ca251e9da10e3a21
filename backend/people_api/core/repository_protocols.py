"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Routes reach the store only through PersonRepository
    - get() raises ResourceNotFoundError for a missing id; it never returns None

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance (ADR: DI over globals)
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from people_api.core.domain_types import PersonId


class PersonLike(Protocol):
    """Structural contract for Person records returned by the store."""
    id: int
    name: str
    age: int
    height: int


class PersonRepository(Protocol):
    """Contract for person persistence — implemented by shell."""
    async def list_all(self) -> list[PersonLike]: ...
    async def get(self, person_id: PersonId) -> PersonLike: ...
    async def create(self, name: str, age: int, height: int) -> PersonLike: ...
    async def replace(
        self, person_id: PersonId, name: str, age: int, height: int,
    ) -> PersonLike: ...
