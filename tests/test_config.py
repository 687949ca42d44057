import pytest
from pydantic import ValidationError

from gmaps_directions.common.config import DirectionsConfig, load_config


def test_defaults_without_environment(monkeypatch):
    for var in ("GOOGLE_API_KEY", "DIRECTIONS_BASE_URL", "MAX_RETRIES", "MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)

    cfg = load_config()

    assert cfg.directions.api_key is None
    assert cfg.directions.max_retries == 0
    assert cfg.directions.endpoint == "https://maps.googleapis.com/maps/api/directions/json"
    assert cfg.directions.base_params() == {}


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "abc123")
    monkeypatch.setenv("MAX_RETRIES", "2")

    cfg = load_config()

    assert cfg.directions.base_params() == {"key": "abc123"}
    assert cfg.directions.max_retries == 2


def test_endpoint_strips_trailing_slash():
    cfg = DirectionsConfig(base_url="https://example.test/directions/")
    assert cfg.endpoint == "https://example.test/directions/json"


@pytest.mark.parametrize(
    "kwargs",
    [{"output_format": "xml"}, {"max_retries": -1}, {"max_workers": 0}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        DirectionsConfig(**kwargs)
