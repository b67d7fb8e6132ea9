# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Employee Service
================
CRUD-style HTTP API over an in-memory collection of employee records,
plus aggregate queries (highest salary, top-ten earners, name search).

Every employee endpoint answers 200, 400, 404 or 500 only; request
validation failures are folded into 400 instead of FastAPI's default 422.

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app.controllers import employee_controller, system_controller
from app.core.config import settings
from app.core.dependencies import get_employee_repo, get_employee_service
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger()


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Optionally seed demo data on startup; report state on shutdown."""
    logger.info("Employee service starting — version %s", settings.SERVICE_VERSION)
    if settings.SEED_DEMO_EMPLOYEES:
        get_employee_service().seed_defaults()
    yield
    logger.info(
        "Employee service shutting down — %d employees in memory",
        get_employee_repo().count(),
    )


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Employee Service",
    description="In-memory employee records with salary aggregates.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    req_id = getattr(request.state, "request_id", None)
    logger.error(
        "Rejected request %s %s: %s",
        request.method, request.url.path, exc.errors(),
        extra={"request_id": req_id},
    )
    return Response(status_code=400)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return Response(status_code=500)


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(employee_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
