from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from payslip.core import store
from payslip.core.errors import NotFoundError
from payslip.models.company import Company, CompanyFilter, CompanySortBy

router = APIRouter(prefix="/api/companies", tags=["companies"])


class BulkDeleteRequest(BaseModel):
    ids: List[str]


@router.get("")
async def list_companies(
    search: str = "",
    is_active: Optional[bool] = None,
    sort_by: CompanySortBy = "name",
    order: str = Query(default="asc", pattern="^(asc|desc)$"),
):
    repo = store.companies
    items = repo.sort(repo.search(CompanyFilter(search=search, is_active=is_active)), by=sort_by, order=order)
    return {"companies": [c.model_dump() for c in items], "total": len(items)}


@router.get("/stats")
async def company_stats():
    return store.companies.stats().model_dump()


@router.post("", status_code=201)
async def create_company(req: Company) -> Company:
    return store.companies.add(req)


@router.get("/{company_id}")
async def get_company(company_id: str) -> Company:
    try:
        return store.companies.get(company_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{company_id}")
async def update_company(company_id: str, req: Company) -> Company:
    try:
        return store.companies.update(company_id, req)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{company_id}", status_code=204)
async def delete_company(company_id: str) -> None:
    try:
        store.companies.delete(company_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/bulk-delete")
async def bulk_delete_companies(req: BulkDeleteRequest):
    return {"deleted": store.companies.delete_many(req.ids)}
