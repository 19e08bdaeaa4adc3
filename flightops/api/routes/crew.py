"""Crew roster and crew document endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from flightops.api.deps import get_crew_document_repo, get_crew_repo, get_current_user
from flightops.contracts.crew import CrewDocument, CrewMember
from flightops.persistence.repositories.crew_repo import CrewDocumentRepository, CrewRepository

router = APIRouter(tags=["crew"])


@router.get("/crew")
async def list_crew(
    user_id: str = Depends(get_current_user),
    repo: CrewRepository = Depends(get_crew_repo),
) -> list[dict]:
    return [c.to_api() for c in await repo.list_all()]


@router.post("/crew", status_code=201)
async def create_crew_member(
    member: CrewMember,
    user_id: str = Depends(get_current_user),
    repo: CrewRepository = Depends(get_crew_repo),
) -> dict:
    return (await repo.save(member)).to_api()


@router.get("/crew/{member_id}")
async def get_crew_member(
    member_id: str,
    user_id: str = Depends(get_current_user),
    repo: CrewRepository = Depends(get_crew_repo),
) -> dict:
    return (await repo.require(member_id)).to_api()


@router.put("/crew/{member_id}")
async def update_crew_member(
    member_id: str,
    member: CrewMember,
    user_id: str = Depends(get_current_user),
    repo: CrewRepository = Depends(get_crew_repo),
) -> dict:
    return (await repo.update(member_id, member)).to_api()


@router.delete("/crew/{member_id}")
async def delete_crew_member(
    member_id: str,
    user_id: str = Depends(get_current_user),
    repo: CrewRepository = Depends(get_crew_repo),
) -> dict:
    return (await repo.delete(member_id)).to_api()


# ------------------------------------------------------------------
# Crew documents
# ------------------------------------------------------------------


@router.get("/crew-documents")
async def list_crew_documents(
    crew_member_id: str | None = Query(None, alias="crewMemberId"),
    user_id: str = Depends(get_current_user),
    repo: CrewDocumentRepository = Depends(get_crew_document_repo),
) -> list[dict]:
    if crew_member_id:
        docs = await repo.list_for_crew_member(crew_member_id)
    else:
        docs = await repo.list_all()
    return [d.to_api() for d in docs]


@router.post("/crew-documents", status_code=201)
async def create_crew_document(
    document: CrewDocument,
    user_id: str = Depends(get_current_user),
    crew: CrewRepository = Depends(get_crew_repo),
    repo: CrewDocumentRepository = Depends(get_crew_document_repo),
) -> dict:
    if not document.crew_member_name:
        member = await crew.require(document.crew_member_id)
        document = document.model_copy(update={"crew_member_name": member.full_name})
    return (await repo.save(document)).to_api()


@router.put("/crew-documents/{document_id}")
async def update_crew_document(
    document_id: str,
    document: CrewDocument,
    user_id: str = Depends(get_current_user),
    repo: CrewDocumentRepository = Depends(get_crew_document_repo),
) -> dict:
    return (await repo.update(document_id, document)).to_api()


@router.delete("/crew-documents/{document_id}")
async def delete_crew_document(
    document_id: str,
    user_id: str = Depends(get_current_user),
    repo: CrewDocumentRepository = Depends(get_crew_document_repo),
) -> dict:
    return (await repo.delete(document_id)).to_api()
