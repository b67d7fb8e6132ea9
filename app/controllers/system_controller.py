# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: ops endpoints — liveness, readiness, Prometheus scrape.
"""

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from app.core.config import settings
from app.core.dependencies import get_employee_repo
from app.repositories.employee_repository import EmployeeRepository

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(repo: EmployeeRepository = Depends(get_employee_repo)):
    """Liveness probe; also reports how many employees are held in memory."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "employees_count": repo.count(),
    }


@router.get("/health/ready")
def readiness_check():
    return {"status": "ready", "service": settings.SERVICE_NAME}


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
