"""Unit tests for ClientConfig loading and persistence."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laakhay.fedi.core import ClientConfig, MissingFieldError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from FEDI_* variables of the host environment."""
    for name in ("BASE", "TOKEN", "CLIENT_ID", "CLIENT_SECRET", "REDIRECT", "TIMEOUT"):
        monkeypatch.delenv(f"FEDI_{name}", raising=False)


class TestClientConfigLoad:
    """Test ClientConfig construction."""

    def test_load_with_values(self):
        """Test explicit values and defaults."""
        config = ClientConfig.load(base="https://example.com", token="tok")
        assert config.base == "https://example.com"
        assert config.token == "tok"
        assert config.client_id == ""
        assert config.timeout == 30.0

    def test_trailing_slash_is_stripped(self):
        """Test base is normalised so paths can be appended."""
        config = ClientConfig.load(base="https://example.com/", token="tok")
        assert config.base == "https://example.com"

    def test_missing_token_raises_missing_field(self):
        """Test absent required field maps to MissingFieldError."""
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.load(base="https://example.com")
        assert exc_info.value.field == "token"

    def test_missing_base_raises_missing_field(self):
        """Test absent base maps to MissingFieldError."""
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.load(token="tok")
        assert exc_info.value.field == "base"

    def test_empty_token_raises_missing_field(self):
        """Test an empty required value counts as absent."""
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.load(base="https://example.com", token="")
        assert exc_info.value.field == "token"

    def test_empty_base_raises_missing_field(self):
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.load(base="", token="tok")
        assert exc_info.value.field == "base"

    def test_non_positive_timeout_rejected(self):
        """Test invalid values surface as pydantic ValidationError."""
        with pytest.raises(ValidationError):
            ClientConfig.load(base="https://example.com", token="tok", timeout=0)

    def test_config_is_frozen(self):
        """Test config cannot be mutated after creation."""
        config = ClientConfig.load(base="https://example.com", token="tok")
        with pytest.raises(ValidationError):
            config.token = "other"


class TestClientConfigSources:
    """Test environment and JSON file sources."""

    def test_from_env(self, monkeypatch):
        """Test FEDI_* variables are read."""
        monkeypatch.setenv("FEDI_BASE", "https://env.example/")
        monkeypatch.setenv("FEDI_TOKEN", "env-token")
        monkeypatch.setenv("FEDI_TIMEOUT", "5")

        config = ClientConfig.from_env()
        assert config.base == "https://env.example"
        assert config.token == "env-token"
        assert config.timeout == 5.0

    def test_from_env_missing_token(self, monkeypatch):
        """Test from_env reports the missing variable's field."""
        monkeypatch.setenv("FEDI_BASE", "https://env.example")
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.from_env()
        assert exc_info.value.field == "token"

    def test_from_env_empty_token(self, monkeypatch):
        """Test FEDI_TOKEN set to an empty string is reported as missing."""
        monkeypatch.setenv("FEDI_BASE", "https://env.example")
        monkeypatch.setenv("FEDI_TOKEN", "")
        with pytest.raises(MissingFieldError) as exc_info:
            ClientConfig.from_env()
        assert exc_info.value.field == "token"

    def test_json_file_round_trip(self, tmp_path):
        """Test a saved config loads back unchanged."""
        path = tmp_path / "fedi.json"
        config = ClientConfig.load(
            base="https://example.com",
            token="tok",
            client_id="cid",
            client_secret="secret",
            redirect="urn:ietf:wg:oauth:2.0:oob",
        )
        config.to_json_file(path)

        loaded = ClientConfig.from_json_file(path)
        assert loaded == config
