"""Typed configuration models using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource


class YahooChartSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="YAHOO_")

    base_url: str = Field(
        default="https://query1.finance.yahoo.com",
        description="Scheme and host of the chart API",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (index_history daily price fetcher)",
        description="User-Agent header sent with every request",
    )
    timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")


class AppSettings(BaseSettings):
    """Top-level settings composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        toml_file="config.toml",
    )

    yahoo: YahooChartSettings = Field(default_factory=YahooChartSettings)
    log_level: str = Field(default="INFO")

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        return (
            kwargs["init_settings"],
            kwargs["env_settings"],
            kwargs["dotenv_settings"],
            TomlConfigSettingsSource(settings_cls),
        )
