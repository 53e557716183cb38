"""API service configuration.

Settings are read from a YAML file and can be overridden by environment
variables, which always win:

    NBA_CONFIG_PATH=config.yaml       # which YAML file to read
    NBA_SERVER__PORT=8080             # nested keys use "__"
    NBA_DATASTORE__FILEPATH=/data/
    NBA_LOG_LEVEL=DEBUG

A missing YAML file is not an error; defaults are used. Invalid values raise
`pydantic.ValidationError` on startup (fail fast).
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = "config.yaml"
FIRST_SEASON = 1997
LAST_SEASON = 2016


def _default_files() -> dict[str, str]:
    # season "1997" is stored as "1996-1997.csv"
    return {str(y): f"{y - 1}-{y}.csv" for y in range(FIRST_SEASON, LAST_SEASON + 1)}


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    timeout_seconds: float = Field(default=15.0, gt=0)


class DataStoreSettings(BaseModel):
    filepath: str = "data/"
    files: dict[str, str] = Field(default_factory=_default_files)

    @field_validator("files", mode="before")
    @classmethod
    def _stringify_keys(cls, v):
        # unquoted YAML keys like 1997 load as ints
        if isinstance(v, dict):
            return {str(k): v[k] for k in v}
        return v

    @field_validator("files")
    @classmethod
    def _year_keys(cls, v: dict[str, str]) -> dict[str, str]:
        bad = [k for k in v if not k.isdigit()]
        if bad:
            raise ValueError(f"season keys must be years, got: {', '.join(sorted(bad))}")
        return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NBA_", env_nested_delimiter="__", extra="ignore")

    server: ServerSettings = Field(default_factory=ServerSettings)
    datastore: DataStoreSettings = Field(default_factory=DataStoreSettings)
    log_level: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment overrides them
        return env_settings, init_settings, file_secret_settings


def read_config_file(path) -> dict:
    """Read a YAML config file into a dict.

    Returns:
        dict: Parsed top-level mapping, or `{}` if the file does not exist or is empty.

    Raises:
        ValueError: If the document is not a mapping.
        yaml.YAMLError: If the file is not valid YAML.
    """
    p = Path(path)
    if not p.is_file():
        return {}
    with p.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_settings(path=None) -> Settings:
    """Build `Settings` from a YAML file plus `NBA_*` environment overrides.

    Args:
        path: YAML file to read. Defaults to `$NBA_CONFIG_PATH`, then `config.yaml`.
    """
    path = path or os.getenv("NBA_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    return Settings(**read_config_file(path))
