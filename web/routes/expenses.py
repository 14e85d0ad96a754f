"""
Expense routes

GET    /api/expenses       - all expenses, date descending
POST   /api/expenses       - add an expense
DELETE /api/expenses/{id}  - delete an expense
"""

import logging

from fastapi import APIRouter, Depends, Path

from web.dependencies import get_expense_service, get_expense_service_write
from web.models.requests import ExpenseCreateRequest
from web.models.responses import DeleteResponse, ErrorResponse, ExpenseResponse
from web.services.expense_service import ExpenseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Expenses"])


@router.get(
    "/expenses",
    response_model=list[ExpenseResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_expenses(
    service: ExpenseService = Depends(get_expense_service),
) -> list[ExpenseResponse]:
    """All expenses ordered by date (newest first)

    Ties keep insertion order. No pagination.
    """
    expenses = await service.list_expenses()
    return [ExpenseResponse.from_expense(e) for e in expenses]


@router.post(
    "/expenses",
    response_model=ExpenseResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_expense(
    request: ExpenseCreateRequest,
    service: ExpenseService = Depends(get_expense_service_write),
) -> ExpenseResponse:
    """Add an expense

    All five fields are required; amount must be positive and partner
    one of the two configured partners.
    """
    logger.info(
        "POST /api/expenses",
        extra={"partner": request.partner, "category": request.category},
    )
    expense = await service.create_expense(request.to_fields())
    return ExpenseResponse.from_expense(expense)


@router.delete(
    "/expenses/{expense_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_expense(
    expense_id: str = Path(..., description="Expense id"),
    service: ExpenseService = Depends(get_expense_service_write),
) -> DeleteResponse:
    """Delete an expense by id"""
    await service.delete_expense(expense_id)
    return DeleteResponse(message="Expense deleted successfully", id=expense_id)
