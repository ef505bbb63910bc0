import pytest

from appwrite_aio.config import DEFAULT_ENDPOINT, ClientConfig
from appwrite_aio.exceptions import (
    MissingProjectIdError,
    MissingRootUriError,
    MissingSecretError,
    ValidationError,
)


def test_defaults():
    config = ClientConfig()
    assert config.endpoint == DEFAULT_ENDPOINT
    assert config.endpoint_realtime == "wss://cloud.appwrite.io/v1"
    assert config.timeout == 60.0
    assert config.chunk_size == 5 * 1024 * 1024


def test_endpoint_must_be_absolute_http_url():
    with pytest.raises(ValidationError):
        ClientConfig(endpoint="cloud.appwrite.io/v1")
    with pytest.raises(ValidationError):
        ClientConfig(endpoint="ftp://cloud.appwrite.io/v1")


def test_realtime_derived_from_http_endpoint():
    config = ClientConfig(endpoint="http://localhost/v1/")
    assert config.endpoint == "http://localhost/v1"
    assert config.endpoint_realtime == "ws://localhost/v1"


def test_set_endpoint_rederives_realtime_unless_overridden():
    config = ClientConfig().set_endpoint("http://localhost/v1")
    assert config.endpoint_realtime == "ws://localhost/v1"

    pinned = ClientConfig(endpoint_realtime="wss://rt.example.com/v1").set_endpoint("http://localhost/v1")
    assert pinned.endpoint_realtime == "wss://rt.example.com/v1"


def test_setters_return_copies():
    base = ClientConfig()
    updated = base.set_project("p").set_key("k").set_locale("fr").add_header("X-Custom", "1")
    assert base.project is None
    assert updated.project == "p"
    assert updated.key == "k"
    assert updated.locale == "fr"
    assert updated.headers == {"x-custom": "1"}


def test_config_is_hashable_value():
    a = ClientConfig(project="p", headers={"X-Custom": "1"})
    b = ClientConfig(project="p").add_header("x-custom", "1")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, ClientConfig(project="q")}) == 2
    with pytest.raises(TypeError):
        a.headers["x-other"] = "2"


def test_from_env_reads_variables():
    env = {
        "APPWRITE_ROOT_URI": "https://aw.example.com/v1",
        "APPWRITE_PROJECT_ID": "proj",
        "APPWRITE_SECRET": "secret",
        "APPWRITE_LOCALE": "",
        "FALLBACK_COOKIE": '{"a_session":"x"}',
        "APPWRITE_TIMEOUT": "5",
    }
    config = ClientConfig.from_env(env)
    assert config.endpoint == "https://aw.example.com/v1"
    assert config.project == "proj"
    assert config.key == "secret"
    assert config.locale is None
    assert config.fallback_cookie == '{"a_session":"x"}'
    assert config.timeout == 5.0


def test_from_env_overrides_win():
    config = ClientConfig.from_env({"APPWRITE_PROJECT_ID": "env"}, project="explicit")
    assert config.project == "explicit"


def test_from_env_invalid_timeout():
    with pytest.raises(ValidationError, match="APPWRITE_TIMEOUT"):
        ClientConfig.from_env({"APPWRITE_TIMEOUT": "soon"})


def test_missing_values_raise_at_resolution():
    with pytest.raises(MissingProjectIdError, match="APPWRITE_PROJECT_ID"):
        ClientConfig(key="k").default_headers()
    with pytest.raises(MissingSecretError, match="APPWRITE_SECRET"):
        ClientConfig(project="p").default_headers()
    with pytest.raises(MissingRootUriError, match="APPWRITE_ROOT_URI"):
        ClientConfig(endpoint=None).require_endpoint()


def test_secret_not_needed_with_jwt():
    headers = ClientConfig(project="p", jwt="token").default_headers()
    assert headers["x-appwrite-jwt"] == "token"
    assert "x-appwrite-key" not in headers


def test_default_headers():
    headers = ClientConfig(project="p", key="k", session="s").add_header("X-Extra", "e").default_headers()
    assert headers["x-sdk-name"]
    assert headers["x-appwrite-response-format"] == "1.6.0"
    assert headers["x-appwrite-project"] == "p"
    assert headers["x-appwrite-key"] == "k"
    assert headers["x-appwrite-session"] == "s"
    assert headers["x-extra"] == "e"
