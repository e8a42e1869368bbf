"""End-to-end tests for the HTTP API."""

from __future__ import annotations

import pytest
from conftest import InMemoryTableReader, Row
from fastapi.testclient import TestClient

from domain_expiry.application.use_cases import CheckDomainExpiration, LookupDomainExpiration
from domain_expiry.domain.services import DomainNormalizer, LocalizedDateFormatter
from domain_expiry.domain.value_objects import TableSchema
from domain_expiry.infrastructure.adapters.api import create_app
from domain_expiry.infrastructure.adapters.database import StaticSchemaLocator

WEBHOOK_PATH = "/webhook-test/domain-check"


def _client(
    normalizer: DomainNormalizer,
    rows: list[Row],
    *,
    domain_fields: tuple[str, ...] = ("domain", "domain_name"),
) -> TestClient:
    reader = InMemoryTableReader({"domains": rows})
    use_case = CheckDomainExpiration(
        expiration_source=LookupDomainExpiration(StaticSchemaLocator([TableSchema("domains")]), reader),
        normalizer=normalizer,
        formatter=LocalizedDateFormatter(),
    )
    app = create_app(
        check_func=use_case.execute,
        version="9.9.9",
        domain_fields=domain_fields,
        webhook_paths=[WEBHOOK_PATH],
    )
    return TestClient(app)


@pytest.fixture
def client(normalizer: DomainNormalizer) -> TestClient:
    """API client over a store holding example.com."""
    return _client(
        normalizer,
        [("example.com", "2030-01-15"), ("broken.com", "not a date"), ("LEGACY HOST", "2031-06-30")],
    )


class TestStatusEndpoints:
    """Tests for the status endpoints."""

    def test_root(self, client: TestClient) -> None:
        """Root should describe the service and its endpoints."""
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["endpoints"]["check"] == "/api/check?domain=example.com"
        assert body["endpoints"]["webhook"] == WEBHOOK_PATH

    def test_health(self, client: TestClient) -> None:
        """Health should report the version."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"] == "9.9.9"


class TestCheckEndpoint:
    """Tests for the domain check endpoint."""

    def test_get_success(self, client: TestClient) -> None:
        """A stored domain should return its expiration."""
        response = client.get("/api/check", params={"domain": "example.com"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["domainName"] == "example.com"
        assert body["expirationDate"] == "2030-01-15"
        assert body["expirationDateThai"]
        assert "example.com" in body["message"]

    def test_post_body_success(self, client: TestClient) -> None:
        """POST should read the domain from the JSON body."""
        response = client.post("/api/check", json={"domain": "https://WWW.Example.com/path?q=1"})

        assert response.status_code == 200
        assert response.json()["expirationDate"] == "2030-01-15"

    def test_post_domain_name_alias(self, client: TestClient) -> None:
        """POST should accept the domain_name alias."""
        response = client.post("/api/check", json={"domain_name": "example.com"})

        assert response.status_code == 200
        assert response.json()["domainName"] == "example.com"

    def test_post_falls_back_to_query(self, client: TestClient) -> None:
        """POST without a body field should use the query string."""
        response = client.post("/api/check?domain=example.com")

        assert response.status_code == 200

    def test_body_wins_over_query(self, client: TestClient) -> None:
        """The body field should take precedence on POST."""
        response = client.post("/api/check?domain=missing.org", json={"domain": "example.com"})

        assert response.status_code == 200
        assert response.json()["domainName"] == "example.com"

    def test_webhook_alias(self, client: TestClient) -> None:
        """The webhook path should behave like the check endpoint."""
        assert client.get(WEBHOOK_PATH, params={"domain": "example.com"}).status_code == 200
        assert client.post(WEBHOOK_PATH, json={"domain": "example.com"}).status_code == 200

    def test_missing_domain(self, client: TestClient) -> None:
        """No domain in query or body should be a 400."""
        response = client.get("/api/check")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"]

    def test_missing_domain_on_post(self, client: TestClient) -> None:
        """POST with an empty or non-JSON body should be a 400."""
        assert client.post("/api/check").status_code == 400
        assert client.post("/api/check", content=b"domain=example.com").status_code == 400
        assert client.post("/api/check", json={"domain": 123}).status_code == 400

    def test_invalid_domain(self, client: TestClient) -> None:
        """A value with no dot that matches nothing should be a 400."""
        response = client.get("/api/check", params={"domain": "xn--zzz"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["domainName"] == "xn--zzz"

    def test_unnormalizable_but_stored(self, client: TestClient) -> None:
        """A value the normalizer rejects is still found if stored as-is."""
        response = client.get("/api/check", params={"domain": "legacy host"})

        assert response.status_code == 200
        assert response.json()["domainName"] == "LEGACY HOST"
        assert response.json()["expirationDate"] == "2031-06-30"

    def test_not_found(self, client: TestClient) -> None:
        """An unknown domain should be a 404 echoing the search."""
        response = client.get("/api/check", params={"domain": "https://www.missing.org"})

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["domainName"] == "missing.org"
        assert body["searchedDomain"] == "https://www.missing.org"
        assert body["normalizedDomain"] == "missing.org"

    def test_invalid_stored_date(self, client: TestClient) -> None:
        """An unparseable stored date should be a 404."""
        response = client.get("/api/check", params={"domain": "broken.com"})

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_backend_error(self, normalizer: DomainNormalizer) -> None:
        """A failing store should be a 500 carrying the cause."""

        class DownLocator:
            async def locate(self) -> list[TableSchema]:
                msg = "Can't connect to MySQL server"
                raise ConnectionError(msg)

        use_case = CheckDomainExpiration(
            expiration_source=LookupDomainExpiration(DownLocator(), InMemoryTableReader()),
            normalizer=normalizer,
            formatter=LocalizedDateFormatter(),
        )
        client = TestClient(create_app(check_func=use_case.execute))

        response = client.get("/api/check", params={"domain": "example.com"})

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert "Can't connect to MySQL server" in response.json()["error"]

    def test_configured_fields(self, normalizer: DomainNormalizer) -> None:
        """Only configured field names should be read."""
        client = _client(normalizer, [("example.com", "2030-01-15")], domain_fields=("domain",))

        assert client.post("/api/check", json={"domain_name": "example.com"}).status_code == 400
        assert client.post("/api/check", json={"domain": "example.com"}).status_code == 200

    def test_cors_headers(self, client: TestClient) -> None:
        """Responses should allow cross-origin callers."""
        response = client.get("/api/check", params={"domain": "example.com"}, headers={"Origin": "https://n8n.local"})

        assert response.headers["access-control-allow-origin"] == "*"
