"""
Ledger REST API client

httpx-based async client for the Ledger Service.
HTTP status codes are mapped back onto the error taxonomy.

Timeout/retry policy:
- every request has a fixed timeout
- idempotent reads (list, health) are retried on connectivity failure
- mutations are never retried (a retried POST could duplicate a record)
"""

import logging
from typing import Any

import httpx

from core.constants import Defaults
from core.errors import (
    ConnectivityError,
    LedgerError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from core.ledger.types import Expense, ExpenseDraft

logger = logging.getLogger(__name__)


class LedgerRestClient:
    """Ledger Service REST client

    ILedgerApi Protocol implementation.

    Args:
        base_url: service base URL (e.g. http://localhost:3001)
        timeout: request timeout (seconds)
        read_retries: extra attempts for GET requests on connectivity failure
        transport: custom httpx transport (tests)
    """

    def __init__(
        self,
        base_url: str = Defaults.API_BASE_URL,
        timeout: float = Defaults.REQUEST_TIMEOUT_SEC,
        read_retries: int = Defaults.READ_RETRIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.read_retries = read_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP client (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "LedgerRestClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @staticmethod
    def _error_message(response: httpx.Response) -> tuple[str, list[str]]:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}", []
        if isinstance(body, dict):
            return str(body.get("error") or body), list(body.get("fields") or [])
        return str(body), []

    def _raise_for_status(self, response: httpx.Response, path: str) -> None:
        """Map error status codes onto the taxonomy

        Raises:
            ValidationError: 400
            NotFoundError: 404
            StorageError: 5xx
            LedgerError: any other error status
        """
        if response.is_success:
            return

        message, fields = self._error_message(response)
        logger.error(
            f"API error {response.status_code}",
            extra={"path": path, "error": message},
        )

        if response.status_code == 400:
            raise ValidationError(fields, message)
        if response.status_code == 404:
            raise NotFoundError(path.rsplit("/", 1)[-1], message)
        if response.status_code >= 500:
            raise StorageError(message)
        raise LedgerError(f"API error {response.status_code}: {message}")

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Run one API request

        Args:
            method: HTTP method
            path: API path (e.g. /api/expenses)
            json: request body

        Returns:
            parsed JSON response

        Raises:
            ConnectivityError: timeout / connection failure after retries
            ValidationError, NotFoundError, StorageError: error responses
        """
        client = await self._get_client()
        attempts = 1 + (self.read_retries if method == "GET" else 0)

        for attempt in range(attempts):
            try:
                logger.debug(f"API request: {method} {path}")
                response = await client.request(method, path, json=json)
            except httpx.TimeoutException as e:
                logger.warning(
                    "Request timeout",
                    extra={"path": path, "attempt": attempt + 1},
                )
                if attempt == attempts - 1:
                    raise ConnectivityError(
                        f"Ledger service at {self.base_url} timed out"
                    ) from e
                continue
            except httpx.RequestError as e:
                logger.warning(
                    "Request error",
                    extra={"path": path, "attempt": attempt + 1, "error": str(e)},
                )
                if attempt == attempts - 1:
                    raise ConnectivityError(
                        f"Ledger service at {self.base_url} is not reachable: {e}"
                    ) from e
                continue

            self._raise_for_status(response, path)
            logger.debug(f"API success: {method} {path}")
            return response.json()

        # attempts >= 1, every path above returns or raises
        raise ConnectivityError(f"Ledger service at {self.base_url} is not reachable")

    # -------------------------------------------------------------------------
    # Ledger operations
    # -------------------------------------------------------------------------

    async def list_expenses(self) -> list[Expense]:
        """All expenses, date descending"""
        data = await self._request("GET", "/api/expenses")
        return [Expense.from_dict(item) for item in data]

    async def create_expense(self, draft: ExpenseDraft) -> Expense:
        """Persist a new expense, returns the stored record"""
        body = {
            "partner": draft.partner,
            "description": draft.description,
            "amount": str(draft.amount),
            "date": draft.date.isoformat(),
            "category": draft.category,
        }
        data = await self._request("POST", "/api/expenses", json=body)
        return Expense.from_dict(data)

    async def delete_expense(self, expense_id: str) -> None:
        await self._request("DELETE", f"/api/expenses/{expense_id}")

    async def check_health(self) -> dict[str, Any]:
        return await self._request("GET", "/api/health")

    async def test_connection(self) -> bool:
        """True when the health endpoint answers OK"""
        try:
            await self.check_health()
            return True
        except LedgerError as e:
            logger.warning("Connection test failed", extra={"error": str(e)})
            return False
