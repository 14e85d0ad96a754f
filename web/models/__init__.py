"""
Web model package

Pydantic schemas
"""

from web.models.requests import ExpenseCreateRequest
from web.models.responses import (
    DeleteResponse,
    ErrorResponse,
    ExpenseResponse,
    HealthResponse,
)

__all__ = [
    # Requests
    "ExpenseCreateRequest",
    # Responses
    "ExpenseResponse",
    "DeleteResponse",
    "HealthResponse",
    "ErrorResponse",
]
