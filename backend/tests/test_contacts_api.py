"""
Contact Book Backend — Contact Endpoint Tests
===============================================

What:  /contacts CRUD end to end over a real SQLite database.
"""

import pytest


def _without_timestamps(row):
    return {key: value for key, value in row.items() if key not in ("createdAt", "updatedAt")}


async def _create(client, payload):
    response = await client.post("/contacts", json=payload)
    assert response.status_code == 201
    return response.json()


class TestContactLifecycle:

    @pytest.mark.asyncio
    async def test_create_get_update_delete(self, test_client, sample_contact):
        created = await _create(test_client, sample_contact)
        contact_id = created["contact_id"]
        assert contact_id
        for key, value in sample_contact.items():
            assert created[key] == value
        assert created["createdAt"] is not None

        fetched = await test_client.get(f"/contacts/{contact_id}")
        assert fetched.status_code == 200
        # Timestamp precision and zone rendering vary by backend
        assert _without_timestamps(fetched.json()) == _without_timestamps(created)

        updated = await test_client.put(f"/contacts/{contact_id}", json={"companyPhone": "999"})
        assert updated.status_code == 200
        body = updated.json()
        assert body["companyPhone"] == "999"
        assert body["contact_id"] == contact_id
        assert body["companyName"] == "Acme"
        assert body["companyEmail"] == "a@acme.com"
        assert body["companyAddress"] == "1 Main St"

        deleted = await test_client.delete(f"/contacts/{contact_id}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Contact deleted successfully"
        assert deleted.json()["deletedContact"]["companyPhone"] == "999"

        gone = await test_client.get(f"/contacts/{contact_id}")
        assert gone.status_code == 404
        assert gone.json()["message"] == "Contact not found"

    @pytest.mark.asyncio
    async def test_create_accepts_missing_and_empty_fields(self, test_client):
        created = await _create(test_client, {"companyName": ""})

        assert created["companyName"] == ""
        assert created["companyEmail"] is None
        assert created["companyPhone"] is None

    @pytest.mark.asyncio
    async def test_duplicates_are_allowed(self, test_client, sample_contact):
        first = await _create(test_client, sample_contact)
        second = await _create(test_client, sample_contact)

        assert first["contact_id"] != second["contact_id"]


class TestContactListing:

    @pytest.mark.asyncio
    async def test_empty_listing(self, test_client):
        response = await test_client.get("/contacts")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_listing_returns_every_row(self, test_client, sample_contact):
        first = await _create(test_client, sample_contact)
        second = await _create(test_client, {**sample_contact, "companyName": "Globex"})

        response = await test_client.get("/contacts")

        ids = sorted(row["contact_id"] for row in response.json())
        assert ids == sorted([first["contact_id"], second["contact_id"]])


class TestContactErrors:

    @pytest.mark.asyncio
    async def test_update_nonexistent_is_not_found(self, test_client):
        response = await test_client.put("/contacts/9999", json={"companyPhone": "999"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_nonexistent_is_not_found(self, test_client):
        response = await test_client.delete("/contacts/9999")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_empty_update_is_bad_request(self, test_client, sample_contact):
        created = await _create(test_client, sample_contact)

        response = await test_client.put(f"/contacts/{created['contact_id']}", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "No fields provided for update"

    @pytest.mark.asyncio
    async def test_unknown_update_field_leaves_row_unchanged(self, test_client, sample_contact):
        created = await _create(test_client, sample_contact)
        url = f"/contacts/{created['contact_id']}"

        response = await test_client.put(url, json={"companyPhone": "999", "owner": "mallory"})

        assert response.status_code == 400
        assert response.json()["details"]["rejected"] == ["owner"]
        assert (await test_client.get(url)).json()["companyPhone"] == "123"

    @pytest.mark.asyncio
    async def test_non_integer_id_is_bad_request(self, test_client):
        response = await test_client.get("/contacts/abc")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["PUT", "DELETE"])
    async def test_non_integer_id_is_bad_request_for_writes(self, test_client, method):
        response = await test_client.request(method, "/contacts/abc", json={"companyPhone": "1"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contact_id", ["99999999999999999999", "3000000000", "0", "-1"])
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_id_outside_column_range_is_not_found(self, test_client, method, contact_id):
        response = await test_client.request(
            method, f"/contacts/{contact_id}", json={"companyPhone": "1"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Contact not found"

    @pytest.mark.asyncio
    async def test_non_string_update_value_leaves_row_unchanged(self, test_client, sample_contact):
        created = await _create(test_client, sample_contact)
        url = f"/contacts/{created['contact_id']}"

        response = await test_client.put(url, json={"companyPhone": 5})

        assert response.status_code == 400
        assert response.json()["details"]["rejected"] == ["companyPhone"]
        assert (await test_client.get(url)).json()["companyPhone"] == "123"

    @pytest.mark.asyncio
    async def test_array_update_body_is_bad_request(self, test_client, sample_contact):
        created = await _create(test_client, sample_contact)

        response = await test_client.put(
            f"/contacts/{created['contact_id']}", json=[{"companyPhone": "999"}]
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
