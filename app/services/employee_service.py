# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Employee store — the query and mutation API over the repository.
Each query works on a single repository snapshot, so a call never sees a
record twice or misses one that was present for its whole duration.
"""

from typing import Optional

from app.core.logging import get_logger
from app.metrics.prometheus import (
    EMPLOYEES_CREATED,
    EMPLOYEES_DELETED,
    EMPLOYEE_LOOKUPS,
    EMPLOYEE_RECORDS,
)
from app.models.domain import Employee, EmployeeCreationInput
from app.repositories.employee_repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeService:
    """Business logic for the in-memory employee store."""

    def __init__(self, employee_repo: EmployeeRepository) -> None:
        self._employees = employee_repo

    # ── Queries ──

    def list_all(self) -> list[Employee]:
        EMPLOYEE_LOOKUPS.labels(operation="list_all").inc()
        return self._employees.snapshot()

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        EMPLOYEE_LOOKUPS.labels(operation="find_by_id").inc()
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            logger.warning("No employee found with id %s", employee_id)
        return employee

    def search_by_name(self, fragment: str) -> list[Employee]:
        """Case-sensitive substring match on the employee name."""
        EMPLOYEE_LOOKUPS.labels(operation="search_by_name").inc()
        return [e for e in self._employees.snapshot() if fragment in e.name]

    def max_salary(self) -> Optional[int]:
        EMPLOYEE_LOOKUPS.labels(operation="max_salary").inc()
        salaries = [e.salary for e in self._employees.snapshot()]
        return max(salaries) if salaries else None

    def top_n_names_by_salary(self, n: int = 10) -> list[str]:
        """Names of the ``n`` best-paid employees, highest salary first.

        The sort is stable, so equal salaries keep insertion order. A
        non-positive ``n`` yields no names.
        """
        EMPLOYEE_LOOKUPS.labels(operation="top_n_names_by_salary").inc()
        ranked = sorted(
            self._employees.snapshot(), key=lambda e: e.salary, reverse=True
        )
        return [e.name for e in ranked[:max(n, 0)]]

    # ── Commands ──

    def create(self, payload: EmployeeCreationInput) -> Employee:
        employee = Employee.from_creation_input(payload)
        self._employees.save(employee)

        EMPLOYEES_CREATED.inc()
        EMPLOYEE_RECORDS.set(self._employees.count())
        logger.info("Employee created: id=%s", employee.id)
        return employee

    def delete_by_id(self, employee_id: str) -> bool:
        """Remove an employee. Deleting an unknown id is a no-op success."""
        if not self._employees.exists(employee_id):
            logger.warning(
                "No employee with id %s exists. Skipping delete.", employee_id
            )
            return True
        self._employees.delete(employee_id)

        EMPLOYEES_DELETED.inc()
        EMPLOYEE_RECORDS.set(self._employees.count())
        logger.info("Employee deleted: id=%s", employee_id)
        return not self._employees.exists(employee_id)

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Create demo employees so the service is usable immediately."""
        demo_employees = [
            {"name": "Alice Martin", "salary": 125000, "age": 41,
             "title": "Engineering Manager", "email": "alice.martin@company.com"},
            {"name": "Bob Dupont", "salary": 98000, "age": 34,
             "title": "Backend Engineer", "email": "bob.dupont@company.com"},
            {"name": "Carol Chen", "salary": 105000, "age": 29,
             "title": "Site Reliability Engineer", "email": "carol.chen@company.com"},
            {"name": "David Kumar", "salary": 72000, "age": 26,
             "title": "QA Analyst", "email": "david.kumar@company.com"},
        ]
        for data in demo_employees:
            self.create(EmployeeCreationInput(**data))
        logger.info("Seeded %d demo employees", len(demo_employees))
