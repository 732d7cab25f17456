"""Client configuration.

``ClientConfig`` carries everything needed to talk to one instance on behalf
of one authorized application: the instance base URL, the OAuth client
credentials and the access token. Persist it (JSON file or environment) so the
authorization flow does not have to be repeated on every run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import MissingFieldError

ENV_PREFIX = "FEDI_"

# Required fields; an empty value counts as absent
_REQUIRED = ("base", "token")


class ClientConfig(BaseSettings):
    """Instance connection data.

    Values passed as keyword arguments win over ``FEDI_*`` environment
    variables.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    base: str = Field(..., min_length=1)
    token: str = Field(..., min_length=1)
    client_id: str = ""
    client_secret: str = ""
    redirect: str = ""
    timeout: float = Field(30.0, gt=0)

    @field_validator("base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise ``https://example.com/`` to ``https://example.com``."""
        return v.rstrip("/")

    @classmethod
    def load(cls, **values: Any) -> ClientConfig:
        """Build a config, raising MissingFieldError for absent or empty required fields."""
        try:
            return cls(**values)
        except ValidationError as e:
            for err in e.errors():
                field = str(err["loc"][0]) if err["loc"] else ""
                if err["type"] == "missing" or (
                    err["type"] == "string_too_short" and field in _REQUIRED
                ):
                    raise MissingFieldError(field) from e
            raise

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Load from ``FEDI_BASE``, ``FEDI_TOKEN``, ... environment variables."""
        return cls.load()

    @classmethod
    def from_json_file(cls, path: str | Path) -> ClientConfig:
        """Load a config previously saved with ``to_json_file``."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.load(**data)

    def to_json_file(self, path: str | Path) -> None:
        """Persist the config as JSON."""
        Path(path).write_text(self.model_dump_json(indent=2), encoding="utf-8")
