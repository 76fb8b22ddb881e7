"""Customer Access Routes — verifies the self-service view over HTTP."""


async def test_view_with_valid_key(client, create_customer):
    created = await create_customer()
    res = await client.get(f"/api/v1/customer-access/{created['accessKey']}", params={"oPage": "x"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["self"]["phone"] == "01712345678"
    assert data["orders"]["pagination"]["page"] == 1


async def test_view_with_malformed_key(client):
    res = await client.get("/api/v1/customer-access/abc")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid access key format"


async def test_view_with_unknown_key(client):
    res = await client.get(f"/api/v1/customer-access/{'0' * 64}")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == (
        "Access key is not valid. Please request for a new key."
    )
