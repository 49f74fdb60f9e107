"""
Shared fixtures: config files on disk and canned HTTP responses
"""

import json
from unittest.mock import Mock

import pytest
import requests

BASE_URL = "https://api.octopus.energy/v1/electricity-meter-points"

VALID_CONFIG = {
    "base_url": BASE_URL,
    "api_key": "sk_test_abc123",
    "mpan": "1200023305967",
    "serial": "21L4381884",
    "page_size": 24000,
    "period_from": "2024-01-01T00:00Z",
    "period_to": "2024-01-02T00:00Z",
}

SAMPLE_RESULTS = [
    {
        "consumption": 0.412,
        "interval_start": "2024-01-01T00:00:00Z",
        "interval_end": "2024-01-01T00:30:00Z",
    },
    {
        "consumption": 0.398,
        "interval_start": "2024-01-01T00:30:00Z",
        "interval_end": "2024-01-01T01:00:00Z",
    },
    {
        "consumption": 0.275,
        "interval_start": "2024-01-01T01:00:00Z",
        "interval_end": "2024-01-01T01:30:00Z",
    },
]


@pytest.fixture
def write_config(tmp_path):
    """Write a config dict (VALID_CONFIG by default) and return its path"""

    def _write(config=None, name="api_config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(VALID_CONFIG if config is None else config))
        return str(path)

    return _write


@pytest.fixture
def make_response():
    """Build a real requests.Response with the given status and body"""

    def _make(status_code=200, payload=None, text=None, url=BASE_URL):
        response = requests.Response()
        response.status_code = status_code
        body = json.dumps(payload) if payload is not None else (text or "")
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.url = url
        return response

    return _make


@pytest.fixture
def consumption_payload():
    return {"count": len(SAMPLE_RESULTS), "next": None, "previous": None, "results": SAMPLE_RESULTS}


@pytest.fixture
def mock_session(make_response, consumption_payload):
    """Session double whose get() answers 200 with the sample payload"""
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(200, consumption_payload)
    return session
