import pytest

from axion_mcp.config import DEFAULT_BASE_URL, ClientConfig, ConfigError, load_config


@pytest.mark.unit
def test_defaults():
    config = load_config({})
    assert config == ClientConfig(base_url=DEFAULT_BASE_URL, api_key=None, timeout=None)
    assert config.headers() == {"Content-Type": "application/json"}


@pytest.mark.unit
def test_empty_api_key_means_no_auth():
    config = load_config({"API_KEY": ""})
    assert config.api_key is None
    assert "Authorization" not in config.headers()


@pytest.mark.unit
def test_api_key_adds_bearer_header():
    config = load_config({"API_KEY": "abc123"})
    assert config.headers() == {"Content-Type": "application/json", "Authorization": "Bearer abc123"}


@pytest.mark.unit
def test_base_url_gets_trailing_slash():
    assert load_config({"AXION_BASE_URL": "http://localhost:8080"}).base_url == "http://localhost:8080/"
    assert load_config({"AXION_BASE_URL": "http://localhost:8080/v1/"}).base_url == "http://localhost:8080/v1/"


@pytest.mark.unit
def test_timeout():
    assert load_config({"AXION_TIMEOUT": "2.5"}).timeout == 2.5
    assert load_config({"AXION_TIMEOUT": " "}).timeout is None


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout(raw):
    with pytest.raises(ConfigError):
        load_config({"AXION_TIMEOUT": raw})
