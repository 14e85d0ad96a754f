"""
Request schemas (Pydantic)

Web API request bodies. Fields are optional here so a missing field
reaches ExpenseDraft.parse and is reported as 400 with the field names.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


class ExpenseCreateRequest(BaseModel):
    """New expense

    amount accepts a JSON number or a decimal string.
    """

    partner: str | None = Field(default=None, description="Partner who paid")
    description: str | None = Field(default=None, description="What was bought")
    amount: Decimal | None = Field(default=None, description="Amount (> 0)")
    date: str | None = Field(default=None, description="Purchase date (YYYY-MM-DD)")
    category: str | None = Field(default=None, description="Category")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "partner": "Sebi",
                    "description": "Laptop",
                    "amount": "1299.00",
                    "date": "2024-03-01",
                    "category": "Elektronik",
                },
            ]
        }
    }

    def to_fields(self) -> dict[str, Any]:
        """Raw field mapping for ExpenseDraft.parse"""
        return self.model_dump()
