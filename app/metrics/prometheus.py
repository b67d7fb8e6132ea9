# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "employee_requests_total",
    "Total HTTP requests to the employee service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "employee_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "employee_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
EMPLOYEES_CREATED = Counter(
    "employee_created_total",
    "Total employees created",
)
EMPLOYEES_DELETED = Counter(
    "employee_deleted_total",
    "Total employees deleted",
)
EMPLOYEE_LOOKUPS = Counter(
    "employee_lookups_total",
    "Total read queries served by the employee store",
    ["operation"],
)
EMPLOYEE_RECORDS = Gauge(
    "employee_records",
    "Number of employee records currently held in memory",
)
