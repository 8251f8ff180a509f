"""
Tests for the remote unit API client
"""
import asyncio
import json

import httpx
import pytest

from app.models.unit_model import UnitStatus, UnitType
from app.schemas.unit_request import CreateUnitRequestModel, UpdateUnitRequestModel
from app.services.unit_api_service import FetchFailure, UnitApiClient

API_BASE_URL = "http://unit-api.test/api"


def _client_for(handler) -> UnitApiClient:
    session = httpx.AsyncClient(base_url=API_BASE_URL, transport=httpx.MockTransport(handler))
    return UnitApiClient(session)


class TestListUnits:
    def test_sends_page_size_and_filters(self, fake_api, unit_client):
        asyncio.run(unit_client.list_units(2, 5, name="alpha", status="Occupied", unit_type="cabin"))

        request = fake_api.list_requests()[-1]
        assert request.url.path == "/api/unit"
        assert dict(request.url.params) == {
            "page": "2",
            "size": "5",
            "name": "alpha",
            "status": "Occupied",
            "type": "cabin",
        }

    def test_all_and_empty_filters_are_omitted(self, fake_api, unit_client):
        asyncio.run(unit_client.list_units(1, 10, name="  ", status="all", unit_type="all"))

        params = dict(fake_api.list_requests()[-1].url.params)
        assert params == {"page": "1", "size": "10"}

    def test_name_all_is_sent(self, fake_api, unit_client):
        asyncio.run(unit_client.list_units(1, 10, name=" all ", status="all", unit_type="all"))

        params = dict(fake_api.list_requests()[-1].url.params)
        assert params == {"page": "1", "size": "10", "name": "all"}

    def test_capitalized_keys_are_normalized(self, fake_api, unit_client):
        unit_id = fake_api.add("Pod A", "cabin", "Cleaning In Progress")

        result = asyncio.run(unit_client.list_units(1, 10))

        assert len(result.content) == 1
        unit = result.content[0]
        assert unit.id == unit_id
        assert unit.name == "Pod A"
        assert unit.type == UnitType.CABIN
        assert unit.status == UnitStatus.CLEANING_IN_PROGRESS

    def test_nested_pagination(self, fake_api, unit_client):
        for i in range(12):
            fake_api.add(f"unit-{i:02d}")

        result = asyncio.run(unit_client.list_units(3, 5))

        assert len(result.content) == 2
        assert result.pagination.page == 3
        assert result.pagination.total == 12
        assert result.pagination.total_pages == 3

    def test_flat_pagination(self, fake_api, unit_client):
        fake_api.flat_pagination = True
        for i in range(7):
            fake_api.add(f"unit-{i}")

        result = asyncio.run(unit_client.list_units(1, 5))

        assert len(result.content) == 5
        assert result.pagination.total == 7
        assert result.pagination.total_pages == 2

    def test_total_pages_derived_when_missing(self):
        def handler(request):
            return httpx.Response(200, json={
                "success": True,
                "data": {"content": [], "pagination": {"page": 1, "size": 10, "total": 21}},
            })

        result = asyncio.run(_client_for(handler).list_units(1, 10))

        assert result.content == []
        assert result.pagination.total_pages == 3

    def test_null_content_is_empty(self):
        def handler(request):
            return httpx.Response(200, json={
                "success": True,
                "data": {"content": None, "pagination": {"page": 1, "size": 10, "total": 0, "totalPages": 0}},
            })

        result = asyncio.run(_client_for(handler).list_units(1, 10))

        assert result.content == []
        assert result.pagination.total_pages == 0

    def test_connection_error_is_fetch_failure(self, fake_api, unit_client):
        fake_api.offline = True

        with pytest.raises(FetchFailure):
            asyncio.run(unit_client.list_units(1, 10))

    def test_timeout_is_fetch_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchFailure):
            asyncio.run(_client_for(handler).list_units(1, 10))

    def test_server_error_is_fetch_failure(self):
        def handler(request):
            return httpx.Response(500, text="boom")

        with pytest.raises(FetchFailure) as exc_info:
            asyncio.run(_client_for(handler).list_units(1, 10))
        assert exc_info.value.status_code == 500

    def test_unexpected_payload_is_fetch_failure(self):
        def handler(request):
            return httpx.Response(200, json={
                "success": True,
                "data": {
                    "content": [{"ID": "1", "Name": "x", "Type": "tent", "Status": "Available"}],
                    "pagination": {"page": 1, "size": 10, "total": 1, "totalPages": 1},
                },
            })

        with pytest.raises(FetchFailure):
            asyncio.run(_client_for(handler).list_units(1, 10))


class TestGetUnit:
    def test_returns_unit(self, fake_api, unit_client):
        unit_id = fake_api.add("Pod B", "capsule", "Occupied")

        unit = asyncio.run(unit_client.get_unit(unit_id))

        assert unit.id == unit_id
        assert unit.status == UnitStatus.OCCUPIED

    def test_missing_unit_is_fetch_failure(self, unit_client):
        with pytest.raises(FetchFailure) as exc_info:
            asyncio.run(unit_client.get_unit("missing"))
        assert exc_info.value.status_code == 404


class TestMutations:
    def test_create_then_list_contains_unit(self, fake_api, unit_client):
        fields = CreateUnitRequestModel(name="Pod C", type=UnitType.CAPSULE, status=UnitStatus.AVAILABLE)

        outcome = asyncio.run(unit_client.create_unit(fields))
        result = asyncio.run(unit_client.list_units(1, 10))

        assert outcome.success is True
        assert outcome.data["id"]
        names = [unit.name for unit in result.content]
        assert names == ["Pod C"]
        assert result.content[0].id == outcome.data["id"]

    def test_create_rejected_is_application_failure(self, unit_client):
        fields = CreateUnitRequestModel.model_construct(name="", type=UnitType.CAPSULE, status=UnitStatus.AVAILABLE)

        outcome = asyncio.run(unit_client.create_unit(fields))

        assert outcome.success is False
        assert outcome.message == "unit name is required"

    def test_update_sends_only_given_fields(self, fake_api, unit_client):
        unit_id = fake_api.add("Pod D", "capsule", "Available")

        outcome = asyncio.run(unit_client.update_unit(unit_id, UpdateUnitRequestModel(status=UnitStatus.OCCUPIED)))

        assert outcome.success is True
        request = fake_api.requests[-1]
        assert request.method == "PUT"
        assert request.url.path == f"/api/unit/{unit_id}"
        assert json.loads(request.content) == {"status": "Occupied"}
        assert fake_api.units[unit_id]["status"] == "Occupied"
        assert fake_api.units[unit_id]["name"] == "Pod D"

    def test_update_business_rule_rejection(self, fake_api, unit_client):
        unit_id = fake_api.add("Pod E", "cabin", "Occupied")

        outcome = asyncio.run(unit_client.update_unit(unit_id, UpdateUnitRequestModel(status=UnitStatus.AVAILABLE)))

        assert outcome.success is False
        assert "occupied" in outcome.message
        assert fake_api.units[unit_id]["status"] == "Occupied"

    def test_delete_then_list_excludes_unit(self, fake_api, unit_client):
        keep_id = fake_api.add("Keep")
        drop_id = fake_api.add("Drop")

        outcome = asyncio.run(unit_client.delete_unit(drop_id))
        result = asyncio.run(unit_client.list_units(1, 10))

        assert outcome.success is True
        assert [unit.id for unit in result.content] == [keep_id]

    def test_delete_missing_is_application_failure(self, unit_client):
        outcome = asyncio.run(unit_client.delete_unit("missing"))

        assert outcome.success is False
        assert outcome.message == "unit with that id was not found"

    def test_no_content_is_success(self):
        def handler(request):
            return httpx.Response(204)

        outcome = asyncio.run(_client_for(handler).delete_unit("any"))

        assert outcome.success is True

    def test_mutation_transport_failure_is_fetch_failure(self, fake_api, unit_client):
        fake_api.offline = True

        with pytest.raises(FetchFailure):
            asyncio.run(unit_client.delete_unit("any"))

    def test_mutation_non_json_error_is_fetch_failure(self):
        def handler(request):
            return httpx.Response(502, text="<html>bad gateway</html>")

        with pytest.raises(FetchFailure) as exc_info:
            asyncio.run(_client_for(handler).delete_unit("any"))
        assert exc_info.value.status_code == 502
