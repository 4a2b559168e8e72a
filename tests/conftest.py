"""Shared test fixtures."""

import json

import pytest
import requests

ENV_VARS = [
    "BUILD_ORG_REPO",
    "BUILD_SHA",
    "BUILD_CONTEXT",
    "BUILD_DESCRIPTION",
    "BUILD_TARGET_URL",
    "BUILD_USER",
    "BUILD_AUTH",
    "BUILD_DEV",
    "BUILD_API_URL",
    "GITHUB_ACTIONS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeResponse:
    def __init__(self, status_code=201, text="{}"):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def mock_http(monkeypatch):
    """Mock requests.post for status reporting; responses default to 201 Created."""
    from build_status import status

    requests_made = []
    responses = []

    def fake_post(url, auth=None, headers=None, **kwargs):
        # Same encoding rules as requests' json= handling
        try:
            data = json.dumps(kwargs["json"], allow_nan=False)
        except ValueError as e:
            raise requests.exceptions.InvalidJSONError(e)
        requests_made.append(
            {"url": url, "body": json.loads(data), "auth": auth, "headers": headers}
        )
        if responses:
            resp = responses.pop(0)
            if isinstance(resp, Exception):
                raise resp
            return resp
        return FakeResponse()

    monkeypatch.setattr(status.requests, "post", fake_post)

    def states():
        return [r["body"]["state"] for r in requests_made]

    return type(
        "MockHttp",
        (),
        {
            "requests": requests_made,
            "responses": responses,
            "states": staticmethod(states),
            "Response": FakeResponse,
        },
    )()


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run_streaming; outcomes default to Succeeded."""
    from build_status import process

    calls = []
    outcomes = []

    def fake_run_streaming(args):
        calls.append(args)
        if outcomes:
            return outcomes.pop(0)
        return process.Succeeded()

    monkeypatch.setattr(process, "run_streaming", fake_run_streaming)

    return type("MockProcess", (), {"calls": calls, "outcomes": outcomes})()
