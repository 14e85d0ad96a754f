"""
Response schemas (Pydantic)

Web API response serialization. Money is serialized as a decimal string.
"""

import datetime as dt

from pydantic import BaseModel, Field

from core.ledger.types import Expense


class ExpenseResponse(BaseModel):
    """Stored expense"""

    id: str = Field(..., description="Expense id (time-based)")
    partner: str = Field(..., description="Partner who paid")
    description: str = Field(..., description="What was bought")
    amount: str = Field(..., description="Amount (decimal string)")
    date: dt.date = Field(..., description="Purchase date")
    category: str = Field(..., description="Category")
    created_at: dt.datetime = Field(..., description="Creation time (UTC)")

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseResponse":
        return cls(
            id=expense.id,
            partner=expense.partner,
            description=expense.description,
            amount=str(expense.amount),
            date=expense.date,
            category=expense.category,
            created_at=expense.created_at,
        )


class DeleteResponse(BaseModel):
    """Delete confirmation"""

    message: str = Field(..., description="Confirmation message")
    id: str = Field(..., description="Deleted expense id")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(default="OK", description="Service status")
    message: str = Field(..., description="Human readable status")
    timestamp: dt.datetime = Field(..., description="Response time (UTC)")
    port: int = Field(..., description="Configured service port")
    database: str = Field(default="connected", description="Store status")
    expenses_count: int = Field(..., description="Number of stored expenses")
    uptime: float = Field(..., description="Process uptime (seconds)")


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses"""

    error: str = Field(..., description="Error message")
    fields: list[str] | None = Field(default=None, description="Invalid fields (400 only)")
