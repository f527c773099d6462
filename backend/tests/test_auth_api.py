"""
Contact Book Backend — Credential Endpoint Tests
==================================================

What:  POST /signup and POST /signin end to end over a real SQLite database.
"""

import pytest


class TestSignUpEndpoint:

    @pytest.mark.asyncio
    async def test_sign_up_created(self, test_client, valid_signup):
        response = await test_client.post("/signup", json=valid_signup)

        assert response.status_code == 201
        assert response.json() == {"message": "User registered successfully!"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "override, message",
        [
            ({"password": "abc"}, "at least 8 characters"),
            ({"password": "abcdefgh"}, "uppercase letter"),
            ({"email": "not-an-email"}, "Invalid email format"),
            ({"name": ""}, "All fields are required"),
        ],
    )
    async def test_sign_up_rejects_bad_input(self, test_client, valid_signup, override, message):
        response = await test_client.post("/signup", json={**valid_signup, **override})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert message in body["message"]

    @pytest.mark.asyncio
    async def test_sign_up_missing_body_is_bad_request(self, test_client):
        response = await test_client.post("/signup")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_duplicate_email_fails_and_first_account_still_works(self, test_client, valid_signup):
        first = await test_client.post("/signup", json=valid_signup)
        second = await test_client.post(
            "/signup", json={**valid_signup, "name": "Someone Else", "password": "0ther!Pass"}
        )

        assert first.status_code == 201
        assert second.status_code == 500
        assert second.json()["message"] == "Error registering user"

        signin = await test_client.post(
            "/signin", json={"email": valid_signup["email"], "password": valid_signup["password"]}
        )
        assert signin.status_code == 200
        rejected = await test_client.post(
            "/signin", json={"email": valid_signup["email"], "password": "0ther!Pass"}
        )
        assert rejected.status_code == 401


class TestSignInEndpoint:

    @pytest.mark.asyncio
    async def test_sign_in_after_sign_up(self, test_client, valid_signup):
        await test_client.post("/signup", json=valid_signup)

        response = await test_client.post(
            "/signin", json={"email": valid_signup["email"], "password": valid_signup["password"]}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Sign in successful!"}

    @pytest.mark.asyncio
    async def test_sign_in_wrong_password(self, test_client, valid_signup):
        await test_client.post("/signup", json=valid_signup)

        response = await test_client.post(
            "/signin", json={"email": valid_signup["email"], "password": "Wr0ng!Pass"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_sign_in_unknown_email(self, test_client):
        response = await test_client.post(
            "/signin", json={"email": "nobody@example.com", "password": "Str0ng!Pass"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_sign_in_requires_both_fields(self, test_client):
        response = await test_client.post("/signin", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "All fields are required"

    @pytest.mark.asyncio
    async def test_sign_in_sets_no_cookie(self, test_client, valid_signup):
        await test_client.post("/signup", json=valid_signup)

        response = await test_client.post(
            "/signin", json={"email": valid_signup["email"], "password": valid_signup["password"]}
        )

        assert "set-cookie" not in response.headers
