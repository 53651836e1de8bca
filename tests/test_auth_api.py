"""
Tests for storefront/routes/auth.py and the session middleware.
"""

import pytest


class TestLogin:

    @pytest.mark.asyncio
    async def test_staff_login(self, client):
        resp = await client.post("/api/auth/login", json={
            "email": "Admin@WalkieRentals.com",
            "password": "admin123",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["role"] == "employee"
        assert "password_hash" not in data["user"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, client):
        resp = await client.post("/api/auth/login", json={
            "email": "admin@walkierentals.com",
            "password": "wrong",
        })
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email(self, client):
        resp = await client.post("/api/auth/login", json={
            "email": "nobody@example.com",
            "password": "admin123",
        })
        assert resp.status_code == 401


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_customer(self, client):
        resp = await client.post("/api/auth/register", json={
            "email": "new@example.com",
            "password": "secret1",
        })
        assert resp.status_code == 201
        assert resp.json()["user"]["role"] == "customer"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client, customer_headers):
        resp = await client.post("/api/auth/register", json={
            "email": "PAT@example.com",
            "password": "another1",
        })
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email already registered"

    @pytest.mark.asyncio
    async def test_short_password(self, client):
        resp = await client.post("/api/auth/register", json={
            "email": "short@example.com",
            "password": "abc",
        })
        assert resp.status_code == 422


class TestSession:

    @pytest.mark.asyncio
    async def test_anonymous(self, client):
        resp = await client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json() == {"authenticated": False, "role": "anonymous", "user": None}

    @pytest.mark.asyncio
    async def test_customer_session(self, client, customer_headers):
        resp = await client.get("/api/auth/me", headers=customer_headers)
        data = resp.json()
        assert data["authenticated"] is True
        assert data["role"] == "customer"
        assert data["user"]["email"] == "pat@example.com"

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, client):
        resp = await client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_scheme_rejected(self, client):
        resp = await client.get("/api/auth/me", headers={"Authorization": "Basic abc"})
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_public_routes_ignore_missing_token(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
