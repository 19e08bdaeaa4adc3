"""Aircraft document endpoints, including file upload."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from flightops.api.deps import get_aircraft_document_repo, get_current_user, get_document_storage
from flightops.contracts.fleet import AircraftDocument, AircraftDocumentUpload
from flightops.persistence.repositories.fleet_repo import AircraftDocumentRepository
from flightops.services.storage import DocumentStorage

router = APIRouter(prefix="/aircraft-documents", tags=["documents"])


@router.get("")
async def list_documents(
    aircraft_id: str | None = Query(None, alias="aircraftId"),
    user_id: str = Depends(get_current_user),
    repo: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
) -> list[dict]:
    docs = await repo.list_for_aircraft(aircraft_id) if aircraft_id else await repo.list_all()
    return [d.to_api() for d in docs]


@router.post("", status_code=201)
async def create_document(
    document: AircraftDocument,
    user_id: str = Depends(get_current_user),
    repo: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
) -> dict:
    return (await repo.save(document)).to_api()


@router.post("/upload", status_code=201)
async def upload_document_file(
    upload: AircraftDocumentUpload,
    user_id: str = Depends(get_current_user),
    repo: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
    storage: DocumentStorage = Depends(get_document_storage),
) -> dict:
    """Store the file and return its public URL; the document record is saved separately."""
    document_id = upload.document_id or repo.new_id()
    uploaded = await run_in_threadpool(
        storage.upload_aircraft_document,
        upload.aircraft_id,
        document_id,
        upload.file_name,
        upload.data_uri,
    )
    return {"documentId": document_id, "fileUrl": uploaded.file_url, "filePath": uploaded.file_path}


@router.put("/{document_id}")
async def update_document(
    document_id: str,
    document: AircraftDocument,
    user_id: str = Depends(get_current_user),
    repo: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
) -> dict:
    return (await repo.update(document_id, document)).to_api()


@router.delete("/{document_id}")
async def delete_document(
    document_id: str,
    user_id: str = Depends(get_current_user),
    repo: AircraftDocumentRepository = Depends(get_aircraft_document_repo),
) -> dict:
    return (await repo.delete(document_id)).to_api()
