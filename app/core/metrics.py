"""Application metrics using the Prometheus client library.

All metrics are defined here, in one inventory.  Other modules import
specific metrics and increment/observe them at the point of action.
Prometheus scrapes them from GET /metrics.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# --- HTTP (recorded by MetricsMiddleware) ---

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status code",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    # Password hashing dominates POST /users/create, hence the upper buckets
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# --- User lifecycle (recorded by UsersService) ---

USERS_CREATED = Counter(
    "users_created_total",
    "Users successfully created",
)

USER_CREATE_CONFLICTS = Counter(
    "user_create_conflicts_total",
    "Create attempts rejected because the email already exists",
    ["detected_by"],  # "precheck" or "constraint"
)
