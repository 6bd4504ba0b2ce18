from typing import List

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from payslip.core import store
from payslip.core.errors import NotFoundError
from payslip.models.employee import Employee, EmployeeFilter, EmployeeIn, EmployeeSortBy

router = APIRouter(prefix="/api/employees", tags=["employees"])


class BulkDeleteRequest(BaseModel):
    ids: List[str]


@router.get("")
async def list_employees(
    search: str = "",
    department: str = "",
    designation: str = "",
    sort_by: EmployeeSortBy = "name",
    order: str = Query(default="asc", pattern="^(asc|desc)$"),
):
    repo = store.employees
    items = repo.search(EmployeeFilter(search=search, department=department, designation=designation))
    items = repo.sort(items, by=sort_by, order=order)
    return {"employees": [e.model_dump() for e in items], "total": len(items)}


@router.get("/stats")
async def employee_stats():
    return store.employees.stats().model_dump()


@router.post("", status_code=201)
async def create_employee(req: EmployeeIn) -> Employee:
    return store.employees.add(Employee(**req.model_dump()))


@router.get("/{employee_id}")
async def get_employee(employee_id: str) -> Employee:
    try:
        return store.employees.get(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{employee_id}")
async def update_employee(employee_id: str, req: EmployeeIn) -> Employee:
    try:
        return store.employees.update(employee_id, Employee(**req.model_dump()))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{employee_id}", status_code=204)
async def delete_employee(employee_id: str) -> None:
    try:
        store.employees.delete(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/bulk-delete")
async def bulk_delete_employees(req: BulkDeleteRequest):
    return {"deleted": store.employees.delete_many(req.ids)}
