"""Tests for the FastAPI conversion service.

WHY: HTTP clients rely on the 422 body's ``error`` kind to tell blank
uploads from malformed ones, and on /formats to discover what the
service accepts.

HOW: FastAPI TestClient exercises the app in-process. The service is
stateless, so one client is shared by every test.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- Conversion failures are 422 with error/format fields
- Request validation failures are FastAPI's default 422 body
"""

from __future__ import annotations

import json
import logging

import pytest
from fastapi.testclient import TestClient

from record_converter import __version__
from record_converter.server.app import app

from conftest import SAMPLE_CSV, SAMPLE_JSON


@pytest.fixture
def client():
    return TestClient(app)


class TestConvertEndpoint:

    def test_csv_to_json(self, client):
        resp = client.post("/convert", json={
            "text": "id,name,value,active\n1,Alice,12.34,true\n",
            "input_format": "csv",
            "output_format": "json",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["record_count"] == 1
        assert body["input_format"] == "csv"
        assert body["output_format"] == "json"
        assert json.loads(body["text"]) == [
            {"id": 1, "name": "Alice", "value": 12.34, "active": True}
        ]

    def test_json_to_csv(self, client):
        resp = client.post("/convert", json={
            "text": SAMPLE_JSON,
            "input_format": "json",
            "output_format": "csv",
        })
        assert resp.status_code == 200
        assert resp.json()["text"] == SAMPLE_CSV

    def test_empty_input(self, client):
        resp = client.post("/convert", json={
            "text": "  ",
            "input_format": "toml",
            "output_format": "json",
        })
        assert resp.status_code == 422
        assert resp.json() == {
            "detail": "Input data for TOML format is empty",
            "error": "empty_input",
            "format": "toml",
        }

    def test_malformed_csv(self, client):
        resp = client.post("/convert", json={
            "text": "id,name,value,active\n1,Alice\n",
            "input_format": "csv",
            "output_format": "yaml",
        })
        assert resp.status_code == 422
        body = resp.json()
        assert body["error"] == "csv"
        assert body["format"] == "csv"
        assert body["detail"].startswith("CSV Error: line 2")

    def test_unsupported_representation(self, client):
        resp = client.post("/convert", json={
            "text": "- id: 1\n  name: A\n  value: .nan\n  active: true\n",
            "input_format": "yaml",
            "output_format": "json",
        })
        assert resp.status_code == 422
        assert resp.json()["error"] == "unsupported_representation"
        assert resp.json()["format"] == "json"

    def test_value_too_large_for_float_is_422(self, client):
        resp = client.post("/convert", json={
            "text": '[{"id": 1, "name": "A", "value": 1' + "0" * 400 + ', "active": true}]',
            "input_format": "json",
            "output_format": "csv",
        })
        assert resp.status_code == 422
        assert resp.json()["error"] == "json"
        assert resp.json()["detail"].startswith("JSON Error: $[0]: int too large")

    def test_conversion_trace_logged(self, client, caplog):
        with caplog.at_level(logging.DEBUG, logger="record_converter.converter"):
            client.post("/convert", json={
                "text": SAMPLE_CSV,
                "input_format": "csv",
                "output_format": "toml",
            })
        messages = [r.getMessage() for r in caplog.records]
        assert "Converting from CSV to TOML" in messages
        assert any(m.startswith("Decoded 3 record(s)") for m in messages)

    def test_unknown_format_is_validation_error(self, client):
        resp = client.post("/convert", json={
            "text": SAMPLE_JSON,
            "input_format": "xml",
            "output_format": "json",
        })
        assert resp.status_code == 422
        assert "error" not in resp.json()


class TestFormatsEndpoint:

    def test_lists_all_formats(self, client):
        resp = client.get("/formats")
        assert resp.status_code == 200
        formats = {item["key"]: item for item in resp.json()}
        assert set(formats) == {"json", "yaml", "csv", "toml"}
        assert formats["yaml"] == {
            "key": "yaml",
            "name": "YAML",
            "extension": ".yaml",
            "media_type": "application/yaml",
        }


class TestHealthEndpoint:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
