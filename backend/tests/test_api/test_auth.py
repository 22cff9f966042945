"""
API tests for seller registration and login

Author: Namma City
Date: 2025-10-17
"""


class TestRegisterEndpoint:

    def test_register_seller(self, client, sample_seller_data):
        response = client.post("/api/register", json=sample_seller_data)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Seller registered successfully"
        assert data["sellerId"]

    def test_duplicate_email_conflicts(self, client, sample_seller_data):
        client.post("/api/register", json=sample_seller_data)

        response = client.post("/api/register", json={**sample_seller_data, "name": "Other"})

        assert response.status_code == 409
        assert response.json() == {"error": "Seller with this email already exists"}

    def test_missing_fields(self, client):
        response = client.post("/api/register", json={"name": "Acme", "email": "acme@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Name, email and password are required"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/register",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON payload"}

    def test_wrongly_typed_field(self, client):
        response = client.post("/api/register", json={"name": ["Acme"], "email": "a@x.com", "password": "p"})

        assert response.status_code == 400


class TestLoginEndpoint:

    def test_login_returns_token(self, client, sample_seller_data):
        seller_id = client.post("/api/register", json=sample_seller_data).json()["sellerId"]

        response = client.post("/api/login", json={"email": "acme@x.com", "password": "s1"})

        assert response.status_code == 200
        assert response.json() == {"message": "Login successful", "token": seller_id}

    def test_wrong_password(self, client, sample_seller_data):
        client.post("/api/register", json=sample_seller_data)

        response = client.post("/api/login", json={"email": "acme@x.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_email(self, client):
        response = client.post("/api/login", json={"email": "ghost@x.com", "password": "s1"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}
