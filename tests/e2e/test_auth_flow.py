"""End-to-end tests for registration and login."""


class TestRegistration:
    """Tests for POST /users."""

    def test_register_returns_token(self, client):
        response = client.post(
            "/users",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret123"},
        )

        assert response.status_code == 200
        assert response.json()["token"]

    def test_register_reports_every_invalid_field(self, client):
        response = client.post(
            "/users", json={"name": "", "email": "not-an-email", "password": "123"}
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [(e["param"], e["msg"]) for e in errors] == [
            ("name", "Name is required"),
            ("email", "Please include a valid email"),
            ("password", "Please enter a password with 6 or more characters"),
        ]
        assert all(e["location"] == "body" for e in errors)

    def test_register_existing_email(self, client, register):
        register("Ada")

        response = client.post(
            "/users",
            json={"name": "Ada", "email": "ADA@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "User already exists"}]}

    def test_register_and_login_with_long_password(self, client):
        password = "x" * 80

        registered = client.post(
            "/users",
            json={"name": "Ada", "email": "ada@example.com", "password": password},
        )
        assert registered.status_code == 200

        login = client.post(
            "/auth", json={"email": "ada@example.com", "password": password}
        )
        assert login.status_code == 200
        assert login.json()["token"]


class TestLogin:
    """Tests for POST /auth and GET /auth."""

    def test_login_and_load_current_user(self, client, register):
        register("Ada")

        response = client.post(
            "/auth", json={"email": "ada@example.com", "password": "secret123"}
        )
        assert response.status_code == 200
        token = response.json()["token"]

        me = client.get("/auth", headers={"x-auth-token": token})
        assert me.status_code == 200
        data = me.json()
        assert data["name"] == "Ada"
        assert data["email"] == "ada@example.com"
        assert data["avatar"].startswith("//www.gravatar.com/avatar/")
        assert "password" not in data
        assert "password_hash" not in data

    def test_bearer_header_is_accepted(self, client, register):
        headers = register("Ada")

        response = client.get(
            "/auth", headers={"Authorization": f"Bearer {headers['x-auth-token']}"}
        )

        assert response.status_code == 200

    def test_wrong_password(self, client, register):
        register("Ada")

        response = client.post(
            "/auth", json={"email": "ada@example.com", "password": "wrong-password"}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"msg": "Invalid credentials"}]}

    def test_login_requires_password(self, client):
        response = client.post("/auth", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "password"

    def test_missing_token(self, client):
        response = client.get("/auth")

        assert response.status_code == 401
        assert response.json()["detail"] == "No token, authorization denied"

    def test_garbage_token(self, client):
        response = client.get("/auth", headers={"x-auth-token": "garbage"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token is not valid"

    def test_token_of_deleted_user(self, client, register):
        headers = register("Ada")
        assert client.delete("/profile", headers=headers).status_code == 200

        response = client.get("/auth", headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "git_sha" in response.json()
