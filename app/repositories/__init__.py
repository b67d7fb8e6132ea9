# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports EmployeeRepository."""
from app.repositories.employee_repository import EmployeeRepository

__all__ = ["EmployeeRepository"]
