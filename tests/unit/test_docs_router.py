"""Unit tests for the documentation HTTP surface."""

import datetime
import os
from decimal import Decimal
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from service_docs import param, result
from service_docs.configuration import DocsSettings
from service_docs.docs_router import DocsRoute
from service_docs.exceptions import ConfigurationError
from service_docs.fastapi_server import create_app, load_service, routes_from_settings


class MathService:
    name = "Math"

    @param("a", "int")
    @param("b", "int")
    @result("int", example=5)
    def sum(self, a, b):
        """Add two integers."""
        return a + b


class ReportService:
    name = "Reports"

    @param("since", "date", optional=True, default=datetime.date(2024, 1, 1))
    @result("decimal", example=Decimal("12.50"))
    def total(self, since=None):
        """Revenue since a date."""


class Nameless:
    def method(self):
        pass


def _make_client(routes, **settings):
    app = create_app(routes=routes, settings=DocsSettings(**settings))
    return TestClient(app)


class TestDescriptorEndpoint:
    def test_returns_descriptor_document(self):
        client = _make_client([DocsRoute(path="/api", procedures=[MathService])])

        response = client.get("/api/smd")

        assert response.status_code == 200
        body = response.json()
        assert body["target"] == "/api"
        assert body["services"] == body["methods"]
        assert body["services"]["Math@sum"]["returns"] == [{"type": "int", "example": 5}]

    def test_route_delimiter_overrides_settings(self):
        client = _make_client(
            [DocsRoute(path="/rpc", procedures=[MathService], delimiter=".")],
            delimiter=":",
        )

        assert list(client.get("/rpc/smd").json()["services"]) == ["Math.sum"]

    def test_settings_delimiter_used_by_default(self):
        client = _make_client(
            [DocsRoute(path="/rpc", procedures=[MathService])], delimiter=":"
        )

        assert list(client.get("/rpc/smd").json()["services"]) == ["Math:sum"]

    def test_configuration_error_is_server_error(self):
        client = _make_client([DocsRoute(path="/api", procedures=[MathService, Nameless])])

        response = client.get("/api/smd")

        assert response.status_code == 500
        assert "Nameless" in response.json()["detail"]

    def test_non_json_metadata_is_encoded(self):
        client = _make_client([DocsRoute(path="/api", procedures=[ReportService])])

        response = client.get("/api/smd")

        assert response.status_code == 200
        entry = response.json()["services"]["Reports@total"]
        assert entry["parameters"] == [
            {"name": "since", "type": "date", "optional": True, "default": "2024-01-01"}
        ]
        assert entry["returns"] == [{"type": "decimal", "example": 12.5}]


class TestDocumentationEndpoint:
    def test_returns_html_page(self):
        client = _make_client(
            [DocsRoute(path="/api", procedures=[MathService])],
            app_name="Calculator",
            app_url="https://rpc.example.com",
        )

        response = client.get("/api/docs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>Calculator</title>" in response.text
        assert "https://rpc.example.com/api" in response.text
        assert "Math@sum" in response.text

    def test_non_json_metadata_is_rendered(self):
        client = _make_client([DocsRoute(path="/api", procedures=[ReportService])])

        response = client.get("/api/docs")

        assert response.status_code == 200
        assert "Reports@total" in response.text
        assert "2024-01-01" in response.text

    def test_route_colors_are_applied(self):
        client = _make_client(
            [DocsRoute(path="/api", procedures=[MathService], colors={"key": "navy"})]
        )

        assert '<span style="color: navy">' in client.get("/api/docs").text

    def test_configuration_error_is_server_error(self):
        client = _make_client([DocsRoute(path="/api", procedures=[Nameless])])

        assert client.get("/api/docs").status_code == 500


def test_health_endpoint():
    client = _make_client([])

    assert client.get("/health").json() == {"status": "healthy"}


class TestServiceLoading:
    def test_load_service_from_import_path(self):
        assert load_service(f"{__name__}:MathService") is MathService

    @pytest.mark.parametrize(
        "import_path",
        ["no_colon_here", "missing.module.for.docs:Service", f"{__name__}:Missing"],
    )
    def test_bad_import_path_is_configuration_error(self, import_path):
        with pytest.raises(ConfigurationError):
            load_service(import_path)

    def test_routes_from_settings(self):
        settings = DocsSettings(rpc_path="/rpc", services=(f"{__name__}:MathService",))

        (route,) = routes_from_settings(settings)

        assert route.path == "/rpc"
        assert route.procedures == [MathService]

    def test_no_services_configured(self):
        assert routes_from_settings(DocsSettings()) == []

    def test_create_app_reads_environment(self):
        env = {
            "RPC_SERVICES": f"{__name__}:MathService",
            "RPC_PATH": "/jsonrpc",
            "RPC_DELIMITER": "/",
        }
        with patch.dict(os.environ, env):
            client = TestClient(create_app())

        assert list(client.get("/jsonrpc/smd").json()["services"]) == ["Math/sum"]
