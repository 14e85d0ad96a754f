"""
Expense API tests

GET/POST/DELETE /api/expenses through the ASGI app.
"""

import httpx
import pytest


def payload(**overrides) -> dict:
    data = {
        "partner": "Sebi",
        "description": "Laptop",
        "amount": "1299.00",
        "date": "2024-03-01",
        "category": "Elektronik",
    }
    data.update(overrides)
    return data


class TestListExpenses:
    """GET /api/expenses"""

    @pytest.mark.asyncio
    async def test_empty(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/expenses")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_date_descending(self, client: httpx.AsyncClient) -> None:
        for d in ("2024-01-01", "2024-03-01", "2024-02-01"):
            await client.post("/api/expenses", json=payload(date=d))

        response = await client.get("/api/expenses")

        assert [e["date"] for e in response.json()] == [
            "2024-03-01",
            "2024-02-01",
            "2024-01-01",
        ]


class TestCreateExpense:
    """POST /api/expenses"""

    @pytest.mark.asyncio
    async def test_created(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/api/expenses", json=payload())

        assert response.status_code == 200
        body = response.json()
        assert body["id"].isdigit()
        assert body["amount"] == "1299.00"
        assert body["partner"] == "Sebi"
        assert body["created_at"]

    @pytest.mark.asyncio
    async def test_round_trip(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/api/expenses", json=payload())).json()

        listed = (await client.get("/api/expenses")).json()

        assert listed == [created]

    @pytest.mark.asyncio
    async def test_numeric_amount_accepted(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/api/expenses", json=payload(amount=12.5))

        assert response.status_code == 200
        assert response.json()["amount"] == "12.5"

    @pytest.mark.asyncio
    async def test_missing_field(self, client: httpx.AsyncClient) -> None:
        data = payload()
        del data["description"]

        response = await client.post("/api/expenses", json=data)

        assert response.status_code == 400
        assert response.json()["fields"] == ["description"]
        assert "error" in response.json()
        assert (await client.get("/api/expenses")).json() == []

    @pytest.mark.asyncio
    async def test_zero_amount(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/api/expenses", json=payload(amount="0"))

        assert response.status_code == 400
        assert response.json()["fields"] == ["amount"]
        assert (await client.get("/api/expenses")).json() == []

    @pytest.mark.asyncio
    async def test_unknown_partner(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/api/expenses", json=payload(partner="Chris"))

        assert response.status_code == 400
        assert response.json()["fields"] == ["partner"]

    @pytest.mark.asyncio
    async def test_unparseable_amount(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/api/expenses", json=payload(amount="twelve"))

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    @pytest.mark.asyncio
    async def test_malformed_json(self, client: httpx.AsyncClient) -> None:
        response = await client.post(
            "/api/expenses",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestDeleteExpense:
    """DELETE /api/expenses/{id}"""

    @pytest.mark.asyncio
    async def test_deleted(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/api/expenses", json=payload())).json()

        response = await client.delete(f"/api/expenses/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Expense deleted successfully",
            "id": created["id"],
        }
        assert (await client.get("/api/expenses")).json() == []

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: httpx.AsyncClient) -> None:
        await client.post("/api/expenses", json=payload())

        response = await client.delete("/api/expenses/does-not-exist")

        assert response.status_code == 404
        assert "not found" in response.json()["error"]
        assert len((await client.get("/api/expenses")).json()) == 1

    @pytest.mark.asyncio
    async def test_repeated_delete(self, client: httpx.AsyncClient) -> None:
        created = (await client.post("/api/expenses", json=payload())).json()

        first = await client.delete(f"/api/expenses/{created['id']}")
        second = await client.delete(f"/api/expenses/{created['id']}")

        assert first.status_code == 200
        assert second.status_code == 404


class TestRouting:
    """Unknown routes"""

    @pytest.mark.asyncio
    async def test_unknown_api_route(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "API route not found"}

    @pytest.mark.asyncio
    async def test_unsupported_method_on_collection(self, client: httpx.AsyncClient) -> None:
        response = await client.put("/api/expenses", json=payload())

        assert response.status_code == 404
        assert response.json() == {"error": "API route not found"}
