"""People Routes — list, get, create, and replace person records.

Invariants:
    - Handlers only translate HTTP ↔ repository calls; errors bubble to the global handlers
    - POST returns 201 with the store-assigned id; a body "id" is dropped by PersonWrite
    - PUT replaces every client field of an existing record (404 if absent)
    - Non-integer or out-of-range ids are rejected by path validation (400), never reach the store

Design Decisions:
    - Repository injected via Depends(get_person_repository) (ADR: DI over a global store handle)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from people_api.api.dependencies import get_person_repository
from people_api.core.domain_types import PersonId
from people_api.core.repository_protocols import PersonRepository
from people_api.schemas.person import (
    INT32_MAX, INT32_MIN, PersonResponse, PersonWrite,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["people"])

PathId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.get("", response_model=list[PersonResponse])
async def list_people(
    people: PersonRepository = Depends(get_person_repository),
):
    """Every stored person, ordered by id."""
    return await people.list_all()


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: PathId, people: PersonRepository = Depends(get_person_repository),
):
    return await people.get(PersonId(person_id))


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(
    body: PersonWrite,
    people: PersonRepository = Depends(get_person_repository),
):
    """Create a person; identity and audit fields come from the store."""
    return await people.create(body.name, body.age, body.height)


@router.put("/{person_id}", response_model=PersonResponse)
async def replace_person(
    person_id: PathId,
    body: PersonWrite,
    people: PersonRepository = Depends(get_person_repository),
):
    """Overwrite name, age and height of an existing person."""
    return await people.replace(
        PersonId(person_id), body.name, body.age, body.height,
    )
