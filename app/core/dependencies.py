# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the repository and service.
"""

from app.repositories.employee_repository import EmployeeRepository
from app.services.employee_service import EmployeeService

# ── Singleton instances (process-lifetime in-memory store) ──
_employee_repo = EmployeeRepository()
_employee_service = EmployeeService(employee_repo=_employee_repo)


# ── FastAPI dependency functions ──
def get_employee_service() -> EmployeeService:
    return _employee_service


def get_employee_repo() -> EmployeeRepository:
    return _employee_repo
