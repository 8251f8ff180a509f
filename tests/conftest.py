"""
Test configuration and fixtures.

FakeUnitApi mimics the remote unit API (list/detail/create/update/delete)
behind an httpx.MockTransport, so no network is needed.
"""
import asyncio
import json
import math
import uuid
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

import main
from app.core.core_client import create_http_client
from app.services.unit_api_service import UnitApiClient

API_BASE_URL = "http://unit-api.test/api"

VALID_TYPES = {"capsule", "cabin"}
VALID_STATUSES = {"Available", "Occupied", "Cleaning In Progress", "Maintenance Needed"}


class FakeUnitApi:
    """In-memory stand-in for the remote unit API."""

    def __init__(self) -> None:
        self.units: Dict[str, Dict[str, str]] = {}
        self.requests: List[httpx.Request] = []
        self.offline = False
        self.flat_pagination = False

    # ---------- helpers ----------

    def add(self, name: str, type: str = "capsule", status: str = "Available") -> str:
        unit_id = str(uuid.uuid4())
        self.units[unit_id] = {"id": unit_id, "name": name, "type": type, "status": status}
        return unit_id

    def list_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET" and r.url.path.endswith("/unit")]

    # ---------- transport ----------

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)

        path = request.url.path
        if path.startswith("/api"):
            path = path[len("/api"):]
        parts = [p for p in path.split("/") if p]
        if not parts or parts[0] != "unit":
            return _error(404, "not found")

        if len(parts) == 1:
            if request.method == "GET":
                return self._list(request)
            if request.method == "POST":
                return self._create(request)
        elif len(parts) == 2:
            unit_id = parts[1]
            if request.method == "GET":
                return self._detail(unit_id)
            if request.method == "PUT":
                return self._update(unit_id, request)
            if request.method == "DELETE":
                return self._delete(unit_id)
        return _error(405, "method not allowed")

    def _list(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        page = int(params.get("page", "1"))
        size = int(params.get("size", "10"))
        name = params.get("name", "")
        status = params.get("status", "")
        unit_type = params.get("type", "")

        rows = sorted(self.units.values(), key=lambda u: u["name"])
        if status:
            rows = [u for u in rows if u["status"] == status]
        if unit_type:
            rows = [u for u in rows if u["type"] == unit_type]
        if name:
            rows = [u for u in rows if name.lower() in u["name"].lower()]

        total = len(rows)
        offset = (page - 1) * size
        content = [
            {"ID": u["id"], "Name": u["name"], "Type": u["type"], "Status": u["status"]}
            for u in rows[offset:offset + size]
        ]
        pagination = {
            "page": page,
            "size": size,
            "total": total,
            "totalPages": math.ceil(total / size) if size else 0,
        }
        if self.flat_pagination:
            data: Dict[str, Any] = {"content": content, **pagination}
        else:
            data = {"content": content, "pagination": pagination}
        return _ok(data)

    def _detail(self, unit_id: str) -> httpx.Response:
        unit = self.units.get(unit_id)
        if unit is None:
            return _error(404, "unit with that id was not found")
        return _ok(dict(unit))

    def _create(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content or b"{}")
        message = _validate(body)
        if message:
            return _error(400, message)
        unit_id = self.add(body["name"], body["type"], body["status"])
        return _ok(dict(self.units[unit_id]), status_code=201)

    def _update(self, unit_id: str, request: httpx.Request) -> httpx.Response:
        unit = self.units.get(unit_id)
        if unit is None:
            return _error(404, "unit with that id was not found")
        body = json.loads(request.content or b"{}")
        merged = {**unit, **body}
        message = _validate(merged)
        if message:
            return _error(400, message)
        if unit["status"] == "Occupied" and merged["status"] == "Available":
            return _error(400, "unit cannot go directly from occupied to available")
        unit.update({k: merged[k] for k in ("name", "type", "status")})
        return _ok(dict(unit))

    def _delete(self, unit_id: str) -> httpx.Response:
        if self.units.pop(unit_id, None) is None:
            return _error(404, "unit with that id was not found")
        return _ok(None)


def _validate(body: Dict[str, Any]) -> Optional[str]:
    if not body.get("name"):
        return "unit name is required"
    if body.get("status") not in VALID_STATUSES:
        return "invalid unit status, must be one of 'Available', 'Occupied', 'Cleaning In Progress', 'Maintenance Needed'"
    if body.get("type") not in VALID_TYPES:
        return "invalid unit type, must be 'cabin' or 'capsule'"
    return None


def _ok(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json={"success": True, "message": "OK", "data": data})


def _error(status_code: int, message: str) -> httpx.Response:
    return httpx.Response(status_code, json={"success": False, "message": message})


@pytest.fixture
def fake_api() -> FakeUnitApi:
    return FakeUnitApi()


@pytest.fixture
def unit_client(fake_api):
    session = httpx.AsyncClient(base_url=API_BASE_URL, transport=httpx.MockTransport(fake_api.handle))
    yield UnitApiClient(session)
    asyncio.run(session.aclose())


@pytest.fixture
def app_client(fake_api, monkeypatch):
    """TestClient whose lifespan talks to the fake unit API."""
    transport = httpx.MockTransport(fake_api.handle)
    monkeypatch.setattr(main, "create_http_client", lambda: create_http_client(transport=transport))

    with TestClient(main.app) as client:
        yield client
