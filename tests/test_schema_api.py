"""Tests for the schema HTTP endpoints."""
import json

import pytest
from fastapi.testclient import TestClient
from databuilder.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


def test_health(client):
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_schema(client):
    """Test that a schema document comes back as serialized entities."""
    schema = {"product": {"name": "Sample", "price": 99.99}, "category": {"type": "category"}}
    response = client.post("/v1/schema/parse", json={"json_text": json.dumps(schema)})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2

    product, category = data["entities"]
    assert product["name"] == "Product"
    assert product["properties"][0]["name"] == "Id"
    assert product["properties"][0]["is_identity"] is True
    assert product["properties"][2]["backend_type"] == "decimal"
    assert product["bucket"] == "general"
    assert product["collection"] == "product"
    assert product["icon"] == "inventory_2"
    assert product["name_plural_kebab_case"] == "products"

    assert category["use_type_discriminator"] is True
    assert category["collection"] == "general"


def test_parse_schema_storage_overrides(client):
    response = client.post("/v1/schema/parse", json={
        "json_text": '{"product": {"name": "Sample"}}',
        "bucket": "shop",
        "scope": "catalog",
        "use_type_discriminator": True,
    })

    assert response.status_code == 200
    product = response.json()["entities"][0]
    assert product["bucket"] == "shop"
    assert product["scope"] == "catalog"
    assert product["use_type_discriminator"] is True
    assert product["collection"] == "general"


def test_parse_schema_empty_document(client):
    response = client.post("/v1/schema/parse", json={"json_text": "{}"})
    assert response.status_code == 200
    assert response.json() == {"entities": [], "count": 0}


def test_parse_schema_invalid_json(client):
    response = client.post("/v1/schema/parse", json={"json_text": "{ invalid json }"})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["message"].startswith("Invalid JSON:")
    assert detail["line"] == 1


def test_parse_schema_deep_nesting_is_bad_request(client):
    text = '{"a": {"b": ' + "[" * 100000 + "]" * 100000 + "}}"
    response = client.post("/v1/schema/parse", json={"json_text": text})

    assert response.status_code == 400
    assert response.json()["detail"]["message"] == "Invalid JSON: nesting too deep"


def test_parse_schema_shape_error(client):
    response = client.post("/v1/schema/parse", json={"json_text": '{"product": "not an object"}'})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["key"] == "product"
    assert "product" in detail["message"]


@pytest.mark.parametrize("value,backend,frontend", [
    (99.99, "decimal", "number"),
    (3, "int", "number"),
    ("550e8400-e29b-41d4-a716-446655440000", "Guid", "string"),
    ("2024-01-15T10:30:00Z", "DateTime", "Date"),
    (["a"], "List<string>", "string[]"),
    (None, "string?", "string | null"),
])
def test_infer_type(client, value, backend, frontend):
    response = client.post("/v1/types/infer", json={"value": value})

    assert response.status_code == 200
    data = response.json()
    assert data["backend"] == backend
    assert data["frontend"] == frontend
