import pytest

from tests.helpers import MOBILE_NUMBER

CUSTOMER = {"name": "John Doe", "email": "john@example.com", "mobile_number": MOBILE_NUMBER}


@pytest.mark.asyncio
async def test_account_scenario(client):
    response = await client.post("/api/v1/accounts/", json=CUSTOMER)
    assert response.status_code == 201
    assert response.json() == {
        "status_code": "201",
        "status_message": "Account created successfully",
    }

    response = await client.get(f"/api/v1/accounts/{MOBILE_NUMBER}")
    assert response.status_code == 200
    body = response.json()
    assert body["mobile_number"] == MOBILE_NUMBER
    assert body["account"]["account_type"] == "Savings"
    assert len(str(body["account"]["account_number"])) == 10

    response = await client.delete(f"/api/v1/accounts/{MOBILE_NUMBER}")
    assert response.status_code == 200
    assert response.json()["status_code"] == "200"

    response = await client.get(f"/api/v1/accounts/{MOBILE_NUMBER}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_customer_is_bad_request(client):
    await client.post("/api/v1/accounts/", json=CUSTOMER)

    response = await client.post("/api/v1/accounts/", json=CUSTOMER)

    assert response.status_code == 400
    body = response.json()
    assert body["api_path"] == "/api/v1/accounts/"
    assert body["error_code"] == 400
    assert MOBILE_NUMBER in body["error_message"]
    assert "error_time" in body


@pytest.mark.asyncio
async def test_update_account(client):
    await client.post("/api/v1/accounts/", json=CUSTOMER)
    fetched = (await client.get(f"/api/v1/accounts/{MOBILE_NUMBER}")).json()
    account_number = fetched["account"]["account_number"]

    response = await client.put(
        "/api/v1/accounts/",
        json={
            "name": "Johnny Doe",
            "account": {"account_number": account_number, "account_type": "Current"},
        },
    )

    assert response.status_code == 200
    assert response.json()["status_message"] == "Request processed successfully"
    updated = (await client.get(f"/api/v1/accounts/{MOBILE_NUMBER}")).json()
    assert updated["name"] == "Johnny Doe"
    assert updated["account"]["account_type"] == "Current"
    assert updated["account"]["account_number"] == account_number
    assert updated["account"]["branch_address"] == fetched["account"]["branch_address"]


@pytest.mark.asyncio
async def test_update_without_account_is_expectation_failed(client):
    await client.post("/api/v1/accounts/", json=CUSTOMER)

    response = await client.put("/api/v1/accounts/", json={"name": "Johnny Doe"})

    assert response.status_code == 417
    assert response.json()["status_code"] == "417"


@pytest.mark.asyncio
async def test_update_unknown_account_is_not_found(client):
    response = await client.put(
        "/api/v1/accounts/", json={"account": {"account_number": 1999999999}}
    )

    assert response.status_code == 404
    assert "account_number" in response.json()["error_message"]


@pytest.mark.asyncio
async def test_invalid_customer_payload_is_bad_request(client):
    response = await client.post(
        "/api/v1/accounts/", json={**CUSTOMER, "mobile_number": "12345"}
    )

    assert response.status_code == 400
    assert "mobile_number" in response.json()["error_message"]


@pytest.mark.asyncio
async def test_invalid_mobile_number_in_path_is_bad_request(client):
    response = await client.get("/api/v1/accounts/12ab")

    assert response.status_code == 400
