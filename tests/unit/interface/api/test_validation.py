"""Unit tests for request validation helpers."""

from datetime import date
from typing import Annotated

import pytest
from fastapi import Body, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from pydantic import BaseModel, BeforeValidator, Field

from devconnect.interface.api.validation import (
    FieldMessage,
    blank_to,
    min_length,
    required,
    valid_email,
    validation_exception_handler,
)


class SampleRequest(BaseModel):
    name: Annotated[str, BeforeValidator(required("Name is required"))] = Field(
        default=None, validate_default=True
    )
    email: Annotated[str, BeforeValidator(valid_email("Bad email"))] = Field(
        default=None, validate_default=True
    )
    password: Annotated[str, BeforeValidator(min_length(6, "Too short"))] = Field(
        default=None, validate_default=True
    )
    started: date | None = None


@pytest.fixture
def client():
    app = FastAPI()
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.post("/sample")
    async def sample(request: SampleRequest = Body()) -> dict:
        return {"ok": True}

    return TestClient(app)


class TestValidationHandler:
    """Tests for the 400 error list."""

    def test_valid_body(self, client):
        response = client.post(
            "/sample",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret123"},
        )

        assert response.status_code == 200

    def test_every_failed_field_is_reported(self, client):
        response = client.post(
            "/sample", json={"name": "", "email": "nope", "password": "123"}
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert {"msg": "Name is required", "param": "name", "location": "body"} in errors
        assert {"msg": "Bad email", "param": "email", "location": "body"} in errors
        assert {"msg": "Too short", "param": "password", "location": "body"} in errors

    def test_missing_fields_use_the_same_messages(self, client):
        response = client.post("/sample", json={})

        assert response.status_code == 400
        messages = [e["msg"] for e in response.json()["errors"]]
        assert messages == ["Name is required", "Bad email", "Too short"]

    def test_missing_body_reports_each_field(self, client):
        response = client.post("/sample")

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [(e["param"], e["msg"]) for e in errors] == [
            ("name", "Name is required"),
            ("email", "Bad email"),
            ("password", "Too short"),
        ]
        assert all(e["location"] == "body" for e in errors)

    def test_type_errors_keep_the_full_message(self, client):
        response = client.post(
            "/sample",
            json={
                "name": "Ada",
                "email": "ada@example.com",
                "password": "secret123",
                "started": "2020",
            },
        )

        assert response.status_code == 400
        [error] = response.json()["errors"]
        assert error["param"] == "started"
        assert error["msg"].startswith("Input should be a valid date")


class TestRequired:
    """Tests for the required validator."""

    @pytest.mark.parametrize("value", [None, "", []])
    def test_rejects_missing_or_empty(self, value):
        with pytest.raises(ValueError, match="Needed"):
            required("Needed")(value)

    @pytest.mark.parametrize("value", ["x", ["x"], 0, False])
    def test_accepts_present_values(self, value):
        assert required("Needed")(value) == value

    def test_raises_field_message(self):
        with pytest.raises(FieldMessage):
            required("Needed")("")


class TestBlankTo:
    """Tests for the blank_to validator."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_blank_values_become_default(self, value):
        assert blank_to(False)(value) is False

    @pytest.mark.parametrize("value", [True, "2020-01-01", 0])
    def test_other_values_pass_through(self, value):
        assert blank_to(None)(value) == value
