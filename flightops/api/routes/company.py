"""Company profile, company documents and customers."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from flightops.api.deps import (
    get_company_document_repo,
    get_company_profile_repo,
    get_current_user,
    get_customer_repo,
    get_document_storage,
)
from flightops.contracts.common import FileUpload
from flightops.contracts.company import CompanyDocument, CompanyProfile, Customer
from flightops.persistence.repositories.company_repo import (
    CompanyDocumentRepository,
    CompanyProfileRepository,
    CustomerRepository,
)
from flightops.services.storage import DocumentStorage

router = APIRouter(tags=["company"])


# ------------------------------------------------------------------
# Profile
# ------------------------------------------------------------------


@router.get("/company/profile")
async def get_profile(
    user_id: str = Depends(get_current_user),
    repo: CompanyProfileRepository = Depends(get_company_profile_repo),
) -> dict:
    return (await repo.get_profile()).to_api()


@router.put("/company/profile")
async def save_profile(
    profile: CompanyProfile,
    user_id: str = Depends(get_current_user),
    repo: CompanyProfileRepository = Depends(get_company_profile_repo),
) -> dict:
    return (await repo.save(profile)).to_api()


@router.post("/company/logo")
async def upload_logo(
    upload: FileUpload,
    user_id: str = Depends(get_current_user),
    repo: CompanyProfileRepository = Depends(get_company_profile_repo),
    storage: DocumentStorage = Depends(get_document_storage),
) -> dict:
    """Upload the logo and point the profile at it."""
    uploaded = await run_in_threadpool(storage.upload_company_logo, upload.file_name, upload.data_uri)
    profile = await repo.get_profile()
    saved = await repo.save(profile.model_copy(update={"logo_url": uploaded.file_url}))
    return saved.to_api()


# ------------------------------------------------------------------
# Company documents
# ------------------------------------------------------------------


@router.get("/company-documents")
async def list_company_documents(
    user_id: str = Depends(get_current_user),
    repo: CompanyDocumentRepository = Depends(get_company_document_repo),
) -> list[dict]:
    return [d.to_api() for d in await repo.list_all()]


@router.post("/company-documents", status_code=201)
async def create_company_document(
    document: CompanyDocument,
    user_id: str = Depends(get_current_user),
    repo: CompanyDocumentRepository = Depends(get_company_document_repo),
) -> dict:
    return (await repo.save(document)).to_api()


@router.put("/company-documents/{document_id}")
async def update_company_document(
    document_id: str,
    document: CompanyDocument,
    user_id: str = Depends(get_current_user),
    repo: CompanyDocumentRepository = Depends(get_company_document_repo),
) -> dict:
    return (await repo.update(document_id, document)).to_api()


@router.delete("/company-documents/{document_id}")
async def delete_company_document(
    document_id: str,
    user_id: str = Depends(get_current_user),
    repo: CompanyDocumentRepository = Depends(get_company_document_repo),
) -> dict:
    return (await repo.delete(document_id)).to_api()


# ------------------------------------------------------------------
# Customers
# ------------------------------------------------------------------


@router.get("/customers")
async def list_customers(
    user_id: str = Depends(get_current_user),
    repo: CustomerRepository = Depends(get_customer_repo),
) -> list[dict]:
    return [c.to_api() for c in await repo.list_all()]


@router.post("/customers", status_code=201)
async def create_customer(
    customer: Customer,
    user_id: str = Depends(get_current_user),
    repo: CustomerRepository = Depends(get_customer_repo),
) -> dict:
    return (await repo.save(customer)).to_api()


@router.get("/customers/{customer_id}")
async def get_customer(
    customer_id: str,
    user_id: str = Depends(get_current_user),
    repo: CustomerRepository = Depends(get_customer_repo),
) -> dict:
    return (await repo.require(customer_id)).to_api()


@router.put("/customers/{customer_id}")
async def update_customer(
    customer_id: str,
    customer: Customer,
    user_id: str = Depends(get_current_user),
    repo: CustomerRepository = Depends(get_customer_repo),
) -> dict:
    return (await repo.update(customer_id, customer)).to_api()


@router.delete("/customers/{customer_id}")
async def delete_customer(
    customer_id: str,
    user_id: str = Depends(get_current_user),
    repo: CustomerRepository = Depends(get_customer_repo),
) -> dict:
    return (await repo.delete(customer_id)).to_api()
