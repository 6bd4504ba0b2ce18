from __future__ import annotations

import math
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from payslip.api.router import api_router
from payslip.config import settings
from payslip.core import store


app = FastAPI(
    title="Payslip Backend",
    version="1.0.0",
    description="Salary slip generator: employees, companies, slips, TDS and PDF export",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # rejected inputs are echoed back; JSON has no inf/nan
    errors = []
    for err in exc.errors():
        err = dict(err)
        ctx = err.get("ctx")
        if isinstance(ctx, dict) and "error" in ctx:
            err["ctx"] = {**ctx, "error": str(ctx["error"])}
        errors.append(err)
    return JSONResponse(status_code=422, content={"detail": _json_safe(jsonable_encoder(errors))})


@app.on_event("startup")
async def _startup() -> None:
    logger.info(
        "Payslip backend starting (env={}, draft autosave={})",
        settings.APP_ENV,
        "on" if settings.DRAFT_AUTOSAVE else "off",
    )


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "ok": True,
        "service": "payslip-backend",
        "env": settings.APP_ENV,
        "draft_autosave": store.ledger.drafts is not None,
        "employees": len(store.employees.all()),
        "companies": len(store.companies.all()),
        "saved_slips": len(store.ledger.list_slips()),
    }
