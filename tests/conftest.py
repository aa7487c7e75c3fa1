from __future__ import annotations

import types
from pathlib import Path

import pytest

import mcpdraw.options as options_module


@pytest.fixture()
def test_env_file(tmp_path, monkeypatch) -> Path:
    """Provide an isolated .env file so a developer's real key never leaks in."""

    env_path = tmp_path / ".env"
    env_path.write_text("")
    monkeypatch.setattr(options_module, "_DOTENV_FILE", env_path)
    # registered through setenv so teardown also drops keys load_dotenv exported
    monkeypatch.setenv(options_module.API_KEY_ENV, "")
    monkeypatch.delenv(options_module.API_KEY_ENV)
    return env_path


class FakeImages:
    """Stands in for AsyncOpenAI().images and records every generate call."""

    def __init__(self, response):
        self.response = response
        self.calls: list[dict] = []

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture()
def fake_client():
    def _factory(response):
        return types.SimpleNamespace(images=FakeImages(response))

    return _factory


def _image_response(*payloads):
    return types.SimpleNamespace(
        data=[types.SimpleNamespace(b64_json=payload) for payload in payloads]
    )


@pytest.fixture()
def image_response():
    return _image_response
