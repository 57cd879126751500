"""DocMan client configuration — local settings file plus layered endpoint keys."""

from __future__ import annotations

import logging
import os
from collections import ChainMap
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from docman_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Corp.Api.DocMan"

INSTANCE_KEY = "TargetedVoyagerInstance"
ENVIRONMENT_KEY = "TargetedVoyagerEnvironment"


class Settings(BaseSettings):
    """Local settings, read from appsettings.json in the working directory."""

    targeted_voyager_instance: str = Field(default="", alias=INSTANCE_KEY)
    targeted_voyager_environment: str = Field(default="", alias=ENVIRONMENT_KEY)

    # Versioned base path of the remote API, relative to the resolved Url
    api_base_path: str = Field(default="api/v1", alias="ApiBasePath")
    request_timeout_seconds: float = Field(default=30.0, alias="RequestTimeoutSeconds")
    log_level: str = Field(default="INFO", alias="LogLevel")

    model_config = SettingsConfigDict(
        json_file="appsettings.json",
        json_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Identifiers come from the settings file only, never the environment
        return (init_settings, JsonConfigSettingsSource(settings_cls))

    @field_validator("targeted_voyager_instance", "targeted_voyager_environment", mode="before")
    @classmethod
    def _strip_identifier(cls, value: object) -> str:
        return str(value).strip() if value is not None else ""

    @field_validator("api_base_path")
    @classmethod
    def _normalize_base_path(cls, value: str) -> str:
        return value.strip().strip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class EndpointKeys:
    """Names of the three layered keys for one instance/environment pair."""
    url: str
    certificate_path: str
    password: str


@dataclass(frozen=True)
class EndpointConfig:
    """Resolved connection values for the DocMan API."""
    url: str
    certificate_path: str
    encrypted_password: str

    def __repr__(self) -> str:
        return (
            f"EndpointConfig(url={self.url!r}, "
            f"certificate_path={self.certificate_path!r}, encrypted_password='***')"
        )


def endpoint_keys(instance: str, environment: str) -> EndpointKeys:
    prefix = f"{instance}.{environment}.{SERVICE_NAME}"
    return EndpointKeys(
        url=f"{prefix}.Url",
        certificate_path=f"{prefix}.CertificatePath",
        password=f"{prefix}.Password",
    )


def _require(source: Mapping[str, str], key: str) -> str:
    value = source.get(key)
    if value is None or not str(value).strip():
        raise ConfigurationError(key)
    return str(value).strip()


def resolve_endpoint_config(
    settings: Settings,
    overrides: Mapping[str, str] | None = None,
) -> EndpointConfig:
    """Resolve Url, CertificatePath and Password for the targeted instance.

    Lookup order is ``overrides`` first, then the process environment. Raises
    ConfigurationError naming the first missing key: the two identifiers are
    checked before the three resolved values.
    """
    if not settings.targeted_voyager_instance:
        raise ConfigurationError(INSTANCE_KEY)
    if not settings.targeted_voyager_environment:
        raise ConfigurationError(ENVIRONMENT_KEY)

    keys = endpoint_keys(
        settings.targeted_voyager_instance,
        settings.targeted_voyager_environment,
    )
    source = ChainMap(dict(overrides or {}), os.environ)

    url = _require(source, keys.url)
    certificate_path = _require(source, keys.certificate_path)
    password = _require(source, keys.password)

    if not url.lower().startswith("https://"):
        raise ConfigurationError(keys.url, "must be an https:// URL")

    logger.info(
        "Resolved DocMan endpoint for %s.%s: %s",
        settings.targeted_voyager_instance, settings.targeted_voyager_environment, url,
    )
    return EndpointConfig(url=url, certificate_path=certificate_path, encrypted_password=password)
