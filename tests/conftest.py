"""
Shared fixtures: test settings, a fake OpenAI client and an app wired to both.
"""
import json
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from gpt5_gateway.app import create_app
from gpt5_gateway.config.settings import Settings

TEST_API_KEY = "sk-test-0123456789abcdefghij"


class FakeResponses:
    """Stands in for ``AsyncOpenAI.responses``; records every create() call."""

    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.result = result if result is not None else SimpleNamespace(output_text="hello")
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


class FakeOpenAI:
    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.responses = FakeResponses(result=result, error=error)
        self.closed = False

    async def close(self):
        self.closed = True


def write_resources(data_dir: Path, context: Any = None, guardrail: Any = None) -> None:
    """Write context.json / guardrail.json; ``None`` leaves the file absent."""
    data_dir.mkdir(parents=True, exist_ok=True)
    if context is not None:
        (data_dir / "context.json").write_text(json.dumps(context), encoding="utf-8")
    if guardrail is not None:
        (data_dir / "guardrail.json").write_text(json.dumps(guardrail), encoding="utf-8")


def make_settings(data_dir: Path, **overrides) -> Settings:
    values = {
        "openai_api_key": TEST_API_KEY,
        "environment": "test",
        "data_dir": data_dir,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    return make_settings(data_dir)


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def app(settings: Settings, fake_openai: FakeOpenAI):
    return create_app(settings, openai_client=fake_openai)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
