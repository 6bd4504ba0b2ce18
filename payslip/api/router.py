from fastapi import APIRouter

from payslip.api.routes import companies, employees, salary, tax

api_router = APIRouter()

api_router.include_router(employees.router)
api_router.include_router(companies.router)
api_router.include_router(salary.router)
api_router.include_router(tax.router)
