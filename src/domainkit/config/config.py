from typing import Annotated

from pydantic import BeforeValidator, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from domainkit.config.helpers import default_enabled_domains, get_log_level
from domainkit.const import LOG_LEVELS


class DomainKitConfig(BaseSettings):
    """Configuration for domainkit."""

    model_config = SettingsConfigDict(
        env_prefix="domainkit__",
        env_file=[".env", "./config/.env"],
        toml_file=["domainkit.toml", "./config/domainkit.toml"],
        env_ignore_empty=True,
        extra="ignore",
        env_nested_delimiter="__",
        validate_by_name=True,
        use_attribute_docstrings=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type["BaseSettings"],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlConfigSettingsSource(settings_cls),
        )
        return sources

    log_level: Annotated[LOG_LEVELS, BeforeValidator(str.upper)] = Field(default_factory=get_log_level)
    """Logging level for domainkit."""

    enabled_domains: list[str] = Field(default_factory=default_enabled_domains)
    """Built-in device domains to register at start-up."""

    sync_available_actions: bool = Field(default=False)
    """Replace an entity's action list with the `available_actions` its events report."""

    @field_validator("enabled_domains")
    @classmethod
    def _validate_enabled_domains(cls, value: list[str]) -> list[str]:
        from domainkit.domains import BUILTIN_SCHEMAS

        unknown = [name for name in value if name not in BUILTIN_SCHEMAS]
        if unknown:
            raise ValueError(f"Unknown device domains {unknown}, expected any of {sorted(BUILTIN_SCHEMAS)}")

        # preserve order, drop repeats
        return list(dict.fromkeys(value))
