"""Tests for request_id in error responses."""

from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from src.project_manager.api.dependencies import get_project_repository
from src.project_manager.repositories import ProjectRepository

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class _BrokenRepository(ProjectRepository):
    def __init__(self):
        pass

    async def list_all(self):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))


async def test_not_found_includes_request_id(client: AsyncClient):
    response = await client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404
    data = response.json()
    assert data["detail"] == "Not Found"
    assert isinstance(data["request_id"], str)
    assert data["request_id"] == response.headers["X-Request-ID"]


async def test_incoming_request_id_is_propagated(client: AsyncClient):
    request_id = str(uuid4())

    response = await client.get("/api/v1/projects/999999", headers={"X-Request-ID": request_id})

    assert response.status_code == 404
    assert response.json()["request_id"] == request_id
    assert response.headers["X-Request-ID"] == request_id


async def test_storage_error_returns_500_with_request_id(
    app: FastAPI, client: AsyncClient, capturing_logger
):
    app.dependency_overrides[get_project_repository] = _BrokenRepository

    response = await client.get("/api/v1/projects")

    assert response.status_code == 500
    data = response.json()
    assert data["detail"] == "Storage error"
    assert data["request_id"] == response.headers["X-Request-ID"]

    errors = [call.kwargs for call in capturing_logger.calls if call.method_name == "error"]
    assert errors[0]["event"] == "Storage error"
    assert errors[0]["error_type"] == "OperationalError"
