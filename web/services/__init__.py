"""
Web service package

Business logic behind the routes
"""

from web.services.expense_service import ExpenseService
from web.services.health_service import HealthService

__all__ = [
    "ExpenseService",
    "HealthService",
]
