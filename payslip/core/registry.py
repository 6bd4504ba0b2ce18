"""
Payslip — employee and company registries.
In-process CRUD stores with search, sorting and summary stats. Records live
for the lifetime of the process (no server-side persistence).
"""
from __future__ import annotations

import uuid
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from loguru import logger

from payslip.core.errors import NotFoundError
from payslip.models.company import Company, CompanyFilter, CompanySortBy, CompanyStats
from payslip.models.employee import Employee, EmployeeFilter, EmployeeSortBy, EmployeeStats


RECENT_DAYS = 30


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


class EmployeeRepository:
    def __init__(self) -> None:
        self._items: Dict[str, Employee] = {}

    def add(self, employee: Employee) -> Employee:
        record = employee.model_copy(update={"id": _new_id()})
        self._items[record.id] = record
        logger.info("Employee added: {} ({})", record.name, record.id)
        return record

    def get(self, employee_id: str) -> Employee:
        try:
            return self._items[employee_id]
        except KeyError:
            raise NotFoundError("Employee", employee_id) from None

    def update(self, employee_id: str, employee: Employee) -> Employee:
        self.get(employee_id)
        record = employee.model_copy(update={"id": employee_id})
        self._items[employee_id] = record
        return record

    def delete(self, employee_id: str) -> None:
        if self._items.pop(employee_id, None) is None:
            raise NotFoundError("Employee", employee_id)
        logger.info("Employee deleted: {}", employee_id)

    def delete_many(self, ids: Iterable[str]) -> int:
        removed = 0
        for i in set(ids):
            if self._items.pop(i, None) is not None:
                removed += 1
        return removed

    def all(self) -> List[Employee]:
        return list(self._items.values())

    def search(self, filters: EmployeeFilter) -> List[Employee]:
        needle = filters.search.lower()
        out = []
        for e in self._items.values():
            if needle:
                haystack = [e.name, e.code, e.designation, e.department or "", e.email or ""]
                if not any(needle in h.lower() for h in haystack):
                    continue
            if filters.department and e.department != filters.department:
                continue
            if filters.designation and e.designation != filters.designation:
                continue
            out.append(e)
        return out

    @staticmethod
    def sort(items: List[Employee], by: EmployeeSortBy = "name", order: str = "asc") -> List[Employee]:
        return sorted(items, key=lambda e: (getattr(e, by) or "").lower(), reverse=order.lower() == "desc")

    def stats(self, today: Optional[date] = None) -> EmployeeStats:
        today = today or _now().date()
        since = today - timedelta(days=RECENT_DAYS)
        items = self.all()
        departments = Counter(e.department or "Unassigned" for e in items)
        recent = 0
        for e in items:
            joined = _parse_day(e.joining_date)
            if joined is not None and joined >= since:
                recent += 1
        return EmployeeStats(
            total_employees=len(items),
            # no inactive state for employees yet
            active_employees=len(items),
            department_counts=dict(departments),
            recently_added=recent,
        )


class CompanyRepository:
    def __init__(self) -> None:
        self._items: Dict[str, Company] = {}

    def add(self, company: Company) -> Company:
        stamp = _now().isoformat()
        record = company.model_copy(update={"id": _new_id(), "created_at": stamp, "updated_at": stamp})
        self._items[record.id] = record
        logger.info("Company added: {} ({})", record.name, record.id)
        return record

    def get(self, company_id: str) -> Company:
        try:
            return self._items[company_id]
        except KeyError:
            raise NotFoundError("Company", company_id) from None

    def update(self, company_id: str, company: Company) -> Company:
        existing = self.get(company_id)
        record = company.model_copy(
            update={"id": company_id, "created_at": existing.created_at, "updated_at": _now().isoformat()}
        )
        self._items[company_id] = record
        return record

    def delete(self, company_id: str) -> None:
        if self._items.pop(company_id, None) is None:
            raise NotFoundError("Company", company_id)
        logger.info("Company deleted: {}", company_id)

    def delete_many(self, ids: Iterable[str]) -> int:
        removed = 0
        for i in set(ids):
            if self._items.pop(i, None) is not None:
                removed += 1
        return removed

    def all(self) -> List[Company]:
        return list(self._items.values())

    def search(self, filters: CompanyFilter) -> List[Company]:
        needle = filters.search.lower()
        out = []
        for c in self._items.values():
            if needle:
                haystack = [c.name, c.gstin or "", c.email or "", c.primary_address.city]
                if not any(needle in h.lower() for h in haystack):
                    continue
            if filters.is_active is not None and c.is_active != filters.is_active:
                continue
            out.append(c)
        return out

    @staticmethod
    def sort(items: List[Company], by: CompanySortBy = "name", order: str = "asc") -> List[Company]:
        return sorted(items, key=lambda c: (getattr(c, by) or "").lower(), reverse=order.lower() == "desc")

    def stats(self, today: Optional[date] = None) -> CompanyStats:
        today = today or _now().date()
        since = today - timedelta(days=RECENT_DAYS)
        items = self.all()
        recent = 0
        for c in items:
            created = _parse_day(c.created_at)
            if created is not None and created >= since:
                recent += 1
        return CompanyStats(
            total_companies=len(items),
            active_companies=sum(1 for c in items if c.is_active),
            recently_added=recent,
        )
