"""Configuration tests — credential modes and their headers."""

import httpx
import pytest
from infobip_sdk.configuration import ApiKey, BasicAuth, Configuration
from pydantic import ValidationError

BASE_URL = "https://api.example.com"


class TestCredentialModes:
    def test_exactly_one_required(self):
        with pytest.raises(ValidationError, match="got: none"):
            Configuration(base_url=BASE_URL)

    def test_two_modes_rejected(self):
        with pytest.raises(ValidationError, match="api_key, bearer_token"):
            Configuration(base_url=BASE_URL, api_key=ApiKey(key="k"), bearer_token="t")

    def test_all_modes_rejected(self):
        with pytest.raises(ValidationError):
            Configuration(
                base_url=BASE_URL,
                api_key=ApiKey(key="k"),
                bearer_token="t",
                basic_auth=BasicAuth(username="u"),
            )

    def test_default_timeout(self):
        assert Configuration.with_bearer_token(BASE_URL, "t").timeout_seconds == 30.0


class TestHeaders:
    def test_api_key_default_prefix(self):
        config = Configuration.with_api_key(BASE_URL, "secret")
        assert config.auth_headers() == {"Authorization": "App secret"}
        assert config.httpx_auth() is None

    def test_api_key_custom_prefix(self):
        config = Configuration.with_api_key(BASE_URL, "secret", prefix="Key")
        assert config.auth_headers() == {"Authorization": "Key secret"}

    def test_api_key_empty_prefix(self):
        assert ApiKey(key="secret", prefix="").header_value() == "secret"

    def test_bearer(self):
        config = Configuration.with_bearer_token(BASE_URL, "token")
        assert config.auth_headers() == {"Authorization": "Bearer token"}

    def test_basic(self):
        config = Configuration.with_basic_auth(BASE_URL, "user", "secret")
        assert config.auth_headers() == {}
        assert isinstance(config.httpx_auth(), httpx.BasicAuth)
