# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Employee endpoints.

Each handler follows validate -> call store -> map to status code.
Client errors answer 400, missing data 404, and any store failure 500.
Error responses carry no body, except delete which always explains itself
in plain text.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.core.config import settings
from app.core.dependencies import get_employee_service
from app.core.logging import get_logger
from app.models.domain import EmployeeCreationInput
from app.services.employee_service import EmployeeService
from app.services.validation import EmployeeValidationError, validate_creation_input

logger = get_logger(__name__)

TOP_EARNERS_LIMIT = 10

router = APIRouter(prefix=settings.API_PREFIX, tags=["Employees"])


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _empty(status_code: int) -> Response:
    return Response(status_code=status_code)


# ── Collection ──

@router.get("")
def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """List every employee currently in the store."""
    try:
        return JSONResponse(content=[e.to_wire() for e in service.list_all()])
    except Exception:
        logger.exception("Failed to get all employees")
        return _empty(500)


@router.post("")
def create_employee(
    payload: EmployeeCreationInput,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee after checking salary, age and email rules."""
    try:
        validate_creation_input(payload)
    except EmployeeValidationError as e:
        logger.error("Invalid input to create employee - %s", e)
        return _empty(400)

    try:
        return JSONResponse(content=service.create(payload).to_wire())
    except Exception:
        logger.exception("Failed to create new employee")
        return _empty(500)


# ── Aggregates (registered before /{employee_id}) ──

@router.get("/highestSalary")
def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        salary = service.max_salary()
        if salary is None:
            return _empty(404)
        return JSONResponse(content=salary)
    except Exception:
        logger.exception("Failed to get highest employee salary")
        return _empty(500)


@router.get("/topTenHighestEarningEmployeeNames")
def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        return JSONResponse(content=service.top_n_names_by_salary(TOP_EARNERS_LIMIT))
    except Exception:
        logger.exception("Failed to get top highest earning employees")
        return _empty(500)


# ── Name search ──

def _search(search_string: Optional[str], service: EmployeeService) -> Response:
    if _is_blank(search_string):
        logger.error("Invalid search string for name search.")
        return _empty(400)

    try:
        employees = service.search_by_name(search_string)
        if not employees:
            return _empty(404)
        return JSONResponse(content=[e.to_wire() for e in employees])
    except Exception:
        logger.exception("Failed to get employees by name")
        return _empty(500)


@router.get("/search")
def search_employees_by_query(
    search: Optional[str] = Query(default=None, description="Name fragment"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Name search with the fragment passed as ``?search=``."""
    return _search(search, service)


@router.get("/search/{search_string}")
def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Employees whose name contains the fragment (case-sensitive)."""
    return _search(search_string, service)


# ── Single record ──

@router.get("/{employee_id}")
def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    if _is_blank(employee_id):
        logger.error("Invalid employee id.")
        return _empty(400)

    try:
        employee = service.find_by_id(employee_id)
        if employee is None:
            return _empty(404)
        return JSONResponse(content=employee.to_wire())
    except Exception:
        logger.exception("Failed to get employee by id")
        return _empty(500)


@router.delete("/{employee_id}")
def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee; 404 when the id is unknown.

    The existence check and the delete are separate store calls. A
    concurrent delete in between is harmless because deleting is idempotent.
    """
    if _is_blank(employee_id):
        return PlainTextResponse("Invalid employee id.", status_code=400)

    failure = PlainTextResponse(
        f"Failed to delete employee with id {employee_id}", status_code=500
    )
    try:
        if service.find_by_id(employee_id) is None:
            logger.warning("Employee with id %s doesn't exist.", employee_id)
            return _empty(404)
        if not service.delete_by_id(employee_id):
            return failure
    except Exception:
        logger.exception("Failed to delete employee with id %s", employee_id)
        return failure
    return PlainTextResponse(f"Successfully deleted employee with id {employee_id}")
