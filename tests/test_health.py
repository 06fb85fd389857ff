"""
Tests for GET /health and the headers every response carries.
"""
import httpx
import openai
from fastapi.testclient import TestClient

from gpt5_gateway.app import create_app

from conftest import FakeOpenAI, make_settings


def test_health(client, fake_openai):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert fake_openai.responses.calls == []


def test_health_independent_of_upstream(settings):
    request = httpx.Request("POST", "https://api.openai.com/v1/responses")
    fake = FakeOpenAI(error=openai.APIConnectionError(request=request))

    with TestClient(create_app(settings, openai_client=fake)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_security_headers_present(client):
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert response.headers["Referrer-Policy"] == "no-referrer"
    assert "Content-Security-Policy" in response.headers


def test_cors_allow_list(data_dir, fake_openai):
    settings = make_settings(data_dir, cors_origin="https://a.example, https://b.example")
    app = create_app(settings, openai_client=fake_openai)

    with TestClient(app) as client:
        allowed = client.get("/health", headers={"Origin": "https://b.example"})
        denied = client.get("/health", headers={"Origin": "https://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "https://b.example"
    assert "access-control-allow-origin" not in denied.headers


def test_client_closed_on_shutdown(app, fake_openai):
    with TestClient(app):
        pass

    assert fake_openai.closed is True
