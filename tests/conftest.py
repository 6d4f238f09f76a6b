"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed riokeys package.
Every test runs in its own working directory with RIOKEYS_* variables
cleared, so a developer's cache.json or .env never leaks in.
"""

import json
import logging
import os
from pathlib import Path

import pytest
import requests

HERE = Path(__file__).resolve().parent
FIXTURES = HERE.parent / "fixtures"


class FakeResponse:
    """The subset of requests.Response that RemoteClient reads."""

    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self):
        return 200 <= self.status_code < 400


class FakeSession:
    """Stand-in for requests.Session that serves canned responses by URL path."""

    def __init__(self, routes=None, error=None):
        self.routes = dict(routes or {})
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        for fragment, response in self.routes.items():
            if fragment in url:
                return response
        return FakeResponse('{"statusCode":404,"error":"Not Found","message":"no route"}', 404)

    def close(self):
        self.closed = True


def load_fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def load_fixture(name: str) -> dict:
    return json.loads(load_fixture_text(name))


@pytest.fixture
def run_details_text():
    return load_fixture_text("run_details.json")


@pytest.fixture
def profile_text():
    return load_fixture_text("character_profile.json")


@pytest.fixture
def fake_session(run_details_text, profile_text):
    return FakeSession({
        "/mythic-plus/run-details": FakeResponse(run_details_text),
        "/characters/profile": FakeResponse(profile_text),
    })


@pytest.fixture
def patch_session(monkeypatch):
    """Make every requests.Session() created by riokeys return ``session``."""
    def _patch(session):
        monkeypatch.setattr(requests, "Session", lambda: session)
        return session
    return _patch


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("RIOKEYS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    # the CLI reconfigures root logging; undo it
    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
    logging.getLogger("riokeys").setLevel(logging.NOTSET)
