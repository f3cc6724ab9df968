"""
Configuration management for rdfwriter.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


class WriterConfig(BaseModel):
    """RDF/XML output formatting."""

    tab: str = "    "
    file_mode: int = Field(default=0o644, ge=0, le=0o7777)
    declare_rdf_namespace: bool = True

    @field_validator("file_mode", mode="before")
    @classmethod
    def parse_octal(cls, value):
        # YAML and env values such as "0644" are octal permission strings
        if isinstance(value, str):
            return int(value, 8)
        return value


class NamespacesConfig(BaseModel):
    """Namespace declarations added to those of the input graph."""

    extra: dict[str, str] = Field(default_factory=dict)


class InputConfig(BaseModel):
    """Parser options for the input file.

    ``format`` is passed to rdflib; None lets rdflib guess from the suffix.
    """

    format: str | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path | None = None


class Settings(BaseSettings):
    """Main configuration class.

    Sources, highest priority first: keyword arguments, environment
    variables (``RDFWRITER_<SECTION>__<KEY>``), the YAML file named by
    ``yaml_file``, field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RDFWRITER_",
        env_nested_delimiter="__",
        yaml_file=DEFAULT_CONFIG_PATH,
    )

    writer: WriterConfig = Field(default_factory=WriterConfig)
    namespaces: NamespacesConfig = Field(default_factory=NamespacesConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Environment variables override the file; a missing file leaves the
    defaults in place.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Settings object with loaded configuration
    """
    config_file = Path(config_path)

    class FileSettings(Settings):
        model_config = SettingsConfigDict(yaml_file=config_file)

    return FileSettings()


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings
