"""
Tests for the fixed-window limiter and the rate limiting middleware.
"""
from fastapi.testclient import TestClient

from gpt5_gateway.app import create_app
from gpt5_gateway.utils.rate_limiter import FixedWindowRateLimiter

from conftest import make_settings


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_limit_within_window():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=10, clock=clock)

    assert limiter.hit("a").allowed
    second = limiter.hit("a")
    third = limiter.hit("a")

    assert second.allowed and second.remaining == 0
    assert not third.allowed
    assert third.reset_after == 10


def test_window_resets_after_elapsed():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)
    limiter.hit("a")
    assert not limiter.hit("a").allowed

    clock.now += 10

    assert limiter.hit("a").allowed


def test_clients_are_counted_separately():
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=10, clock=FakeClock())

    assert limiter.hit("a").allowed
    assert limiter.hit("b").allowed
    assert not limiter.hit("a").allowed


def test_expired_windows_are_pruned():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)
    limiter.hit("a")

    clock.now += 20
    limiter.hit("b")

    assert set(limiter._windows) == {"b"}


def test_middleware_rejects_before_calling_upstream(data_dir, fake_openai):
    settings = make_settings(data_dir, rate_limit_max=2, rate_limit_window_ms=60_000)
    app = create_app(settings, openai_client=fake_openai)
    payload = {"role": "user", "prompt": "Hi"}

    with TestClient(app) as client:
        first = client.post("/v1/chat", json=payload)
        second = client.post("/v1/chat", json=payload)
        third = client.post("/v1/chat", json=payload)

    assert [first.status_code, second.status_code] == [200, 200]
    assert third.status_code == 429
    assert third.json()["error"]["type"] == "TooManyRequests"
    assert "Retry-After" in third.headers
    assert first.headers["RateLimit-Remaining"] == "1"
    assert len(fake_openai.responses.calls) == 2


def test_forwarded_clients_have_their_own_budget(data_dir, fake_openai):
    settings = make_settings(data_dir, rate_limit_max=1)
    app = create_app(settings, openai_client=fake_openai)

    with TestClient(app) as client:
        a = client.get("/health", headers={"X-Forwarded-For": "203.0.113.1, 10.0.0.1"})
        b = client.get("/health", headers={"X-Forwarded-For": "203.0.113.2"})
        a_again = client.get("/health", headers={"X-Forwarded-For": "203.0.113.1"})

    assert [a.status_code, b.status_code, a_again.status_code] == [200, 200, 429]
