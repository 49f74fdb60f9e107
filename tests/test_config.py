"""
Test Config Loader - request descriptor construction and URL template
"""

import json

import pytest
from pydantic import ValidationError

from conftest import BASE_URL, VALID_CONFIG
from consumption_pipe.coreutils.config import RequestDescriptor, load_request_config
from consumption_pipe.exceptions import ConfigError, ConfigFileError, ConfigValueError


def test_load_valid_config(write_config):
    descriptor = load_request_config(write_config())

    assert descriptor.base_url == BASE_URL
    assert descriptor.api_key == "sk_test_abc123"
    assert descriptor.meter_point_id == "1200023305967"
    assert descriptor.meter_serial == "21L4381884"
    assert descriptor.page_size == 24000
    assert descriptor.period_from == "2024-01-01T00:00Z"
    assert descriptor.period_to == "2024-01-02T00:00Z"


def test_request_url_follows_template(write_config):
    descriptor = load_request_config(write_config())

    assert descriptor.request_url == (
        f"{BASE_URL}/1200023305967/meters/21L4381884/consumption/"
        "?page_size=24000&period_from=2024-01-01T00:00Z&period_to=2024-01-02T00:00Z"
    )


def test_request_url_contains_each_part_once_in_order():
    descriptor = RequestDescriptor(
        base_url="https://meters.example",
        api_key="k",
        meter_point_id="MPAN42",
        meter_serial="SERIAL7",
        page_size=12345,
        period_from="2023-05-01T00:00:00+00:00",
        period_to="2023-06-01T00:00:00+00:00",
    )
    url = descriptor.request_url
    parts = [
        "https://meters.example",
        "MPAN42",
        "SERIAL7",
        "12345",
        "2023-05-01T00:00:00+00:00",
        "2023-06-01T00:00:00+00:00",
    ]

    positions = []
    for part in parts:
        assert url.count(part) == 1, f"{part!r} should appear exactly once in {url}"
        positions.append(url.index(part))
    assert positions == sorted(positions)


def test_request_url_is_idempotent(write_config):
    descriptor = load_request_config(write_config())

    first = descriptor.request_url
    second = descriptor.request_url

    assert first == second
    assert first is second  # cached after first access


def test_descriptor_is_immutable(write_config):
    descriptor = load_request_config(write_config())

    with pytest.raises(ValidationError):
        descriptor.page_size = 1


def test_api_key_hidden_from_repr(write_config):
    descriptor = load_request_config(write_config())

    assert "sk_test_abc123" not in repr(descriptor)


def test_missing_file_raises_config_file_error(tmp_path):
    with pytest.raises(ConfigFileError, match="not found"):
        load_request_config(str(tmp_path / "nope.json"))


def test_invalid_json_raises_config_file_error(tmp_path):
    path = tmp_path / "api_config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigFileError, match="not valid JSON"):
        load_request_config(str(path))


def test_non_object_document_raises_config_file_error(tmp_path):
    path = tmp_path / "api_config.json"
    path.write_text(json.dumps([VALID_CONFIG]))

    with pytest.raises(ConfigFileError):
        load_request_config(str(path))


@pytest.mark.parametrize("key", sorted(VALID_CONFIG))
def test_every_key_is_required(write_config, key):
    config = {k: v for k, v in VALID_CONFIG.items() if k != key}

    with pytest.raises(ConfigValueError, match=key):
        load_request_config(write_config(config))


@pytest.mark.parametrize(
    "key,value",
    [
        ("page_size", "24000"),
        ("page_size", True),
        ("page_size", 0),
        ("page_size", -5),
        ("mpan", 1200023305967),
        ("api_key", None),
        ("period_from", "yesterday"),
    ],
)
def test_wrong_typed_or_invalid_value(write_config, key, value):
    config = dict(VALID_CONFIG, **{key: value})

    with pytest.raises(ConfigValueError):
        load_request_config(write_config(config))


def test_period_from_must_precede_period_to(write_config):
    config = dict(
        VALID_CONFIG,
        period_from="2024-01-02T00:00Z",
        period_to="2024-01-01T00:00Z",
    )

    with pytest.raises(ConfigValueError, match="period_from"):
        load_request_config(write_config(config))


def test_config_errors_share_base_class(tmp_path, write_config):
    config = {k: v for k, v in VALID_CONFIG.items() if k != "mpan"}

    with pytest.raises(ConfigError):
        load_request_config(write_config(config))
    with pytest.raises(ConfigError):
        load_request_config(str(tmp_path / "missing.json"))


def test_error_message_does_not_leak_api_key(write_config):
    config = dict(VALID_CONFIG, page_size="lots")

    with pytest.raises(ConfigValueError) as excinfo:
        load_request_config(write_config(config))

    assert "sk_test_abc123" not in str(excinfo.value)
