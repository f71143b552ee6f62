from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

CONFIG_PATH_ENV = "CINEAI_CONFIG"
DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"


class Settings(BaseModel):
    """Application configuration resolved from env vars and optional TOML files."""

    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default=DEFAULT_TMDB_BASE_URL, alias="TMDB_BASE_URL")
    tmdb_language: str | None = Field(default=None, alias="TMDB_LANGUAGE")

    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_base_url: str | None = Field(default=None, alias="OPENAI_BASE_URL")
    openai_model: str | None = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")

    # Applied to both providers
    request_timeout: float = Field(default=20.0, gt=0, alias="CINEAI_REQUEST_TIMEOUT")

    recommendation_max_tokens: int = Field(default=800, gt=0)
    recommendation_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    thematic_max_tokens: int = Field(default=500, gt=0)
    thematic_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    analysis_max_tokens: int = Field(default=300, gt=0)
    analysis_temperature: float = Field(default=0.6, ge=0.0, le=2.0)

    # MCP Service Configuration
    mcp_host: str = Field(default="127.0.0.1", alias="MCP_HOST")
    mcp_port: int = Field(default=8092, alias="MCP_PORT")
    mcp_transport: str = Field(default="stdio", alias="MCP_TRANSPORT")

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    def require_tmdb(self) -> None:
        """Ensure TMDB connection settings are available."""
        if not self.tmdb_api_key:
            raise SettingsError(
                "Missing TMDB_API_KEY. Configure environment or TOML file.",
            )

    def require_openai(self) -> None:
        """Ensure completion provider settings are available."""
        if not self.openai_api_key:
            raise SettingsError(
                "Missing OPENAI_API_KEY. Configure environment or TOML file.",
            )


class SettingsError(RuntimeError):
    """Raised when configuration cannot be resolved."""


@dataclass(frozen=True)
class SettingsLoadResult:
    settings: Settings
    source_path: Path | None


def load_settings(config_path: Path | None = None, *, load_env: bool = True) -> SettingsLoadResult:
    """Load settings from .env files, environment variables, and optional TOML configuration."""

    if load_env:
        load_dotenv()

    resolved_path = _determine_config_path(config_path)
    config_data: dict[str, Any] = {}

    if resolved_path and resolved_path.exists():
        with resolved_path.open("rb") as handle:
            try:
                toml_payload = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise SettingsError(f"Invalid TOML in {resolved_path}: {exc}") from exc
        try:
            config_data = _flatten_toml(toml_payload)
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"Invalid value in {resolved_path}: {exc}") from exc

    try:
        env_data = _collect_env_overrides()
    except ValueError as exc:
        raise SettingsError(f"Invalid environment value: {exc}") from exc
    merged = {**config_data, **env_data}

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as exc:  # pragma: no cover - surfaced via CLI messaging
        raise SettingsError(str(exc)) from exc

    return SettingsLoadResult(settings=settings, source_path=resolved_path)


def _determine_config_path(config_path: Path | None) -> Path | None:
    if config_path:
        return config_path

    env_override = os.getenv(CONFIG_PATH_ENV)
    if env_override:
        return Path(env_override).expanduser().resolve()

    default_path = Path.home() / ".config" / "cineai" / "config.toml"
    return default_path if default_path.exists() else None


def _flatten_toml(payload: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}

    tmdb_cfg = payload.get("tmdb", {})
    if "api_key" in tmdb_cfg:
        result["tmdb_api_key"] = tmdb_cfg.get("api_key")
    if "base_url" in tmdb_cfg:
        result["tmdb_base_url"] = tmdb_cfg.get("base_url")
    if "language" in tmdb_cfg:
        result["tmdb_language"] = tmdb_cfg.get("language")

    openai_cfg = payload.get("openai", {})
    if "api_key" in openai_cfg:
        result["openai_api_key"] = openai_cfg.get("api_key")
    if "base_url" in openai_cfg:
        result["openai_base_url"] = openai_cfg.get("base_url")
    if "model" in openai_cfg:
        result["openai_model"] = openai_cfg.get("model")

    completion_cfg = payload.get("completion", {})
    if "request_timeout" in completion_cfg:
        result["request_timeout"] = float(completion_cfg.get("request_timeout"))
    for section in ("recommendation", "thematic", "analysis"):
        section_cfg = completion_cfg.get(section, {}) if isinstance(completion_cfg, dict) else {}
        if "max_tokens" in section_cfg:
            result[f"{section}_max_tokens"] = int(section_cfg.get("max_tokens"))
        if "temperature" in section_cfg:
            result[f"{section}_temperature"] = float(section_cfg.get("temperature"))

    mcp_cfg = payload.get("mcp", {})
    if "host" in mcp_cfg:
        result["mcp_host"] = mcp_cfg.get("host")
    if "port" in mcp_cfg:
        result["mcp_port"] = int(mcp_cfg.get("port"))
    if "transport" in mcp_cfg:
        result["mcp_transport"] = mcp_cfg.get("transport")

    return result


def _collect_env_overrides() -> dict[str, Any]:
    mapping: dict[str, str] = {
        "TMDB_API_KEY": "tmdb_api_key",
        "TMDB_BASE_URL": "tmdb_base_url",
        "TMDB_LANGUAGE": "tmdb_language",
        "OPENAI_API_KEY": "openai_api_key",
        "OPENAI_BASE_URL": "openai_base_url",
        "OPENAI_MODEL": "openai_model",
        "CINEAI_REQUEST_TIMEOUT": "request_timeout",
        "CINEAI_RECOMMENDATION_MAX_TOKENS": "recommendation_max_tokens",
        "CINEAI_RECOMMENDATION_TEMPERATURE": "recommendation_temperature",
        "CINEAI_THEMATIC_MAX_TOKENS": "thematic_max_tokens",
        "CINEAI_THEMATIC_TEMPERATURE": "thematic_temperature",
        "CINEAI_ANALYSIS_MAX_TOKENS": "analysis_max_tokens",
        "CINEAI_ANALYSIS_TEMPERATURE": "analysis_temperature",
        "MCP_HOST": "mcp_host",
        "MCP_PORT": "mcp_port",
        "MCP_TRANSPORT": "mcp_transport",
    }
    int_fields = {
        "recommendation_max_tokens",
        "thematic_max_tokens",
        "analysis_max_tokens",
        "mcp_port",
    }
    float_fields = {
        "request_timeout",
        "recommendation_temperature",
        "thematic_temperature",
        "analysis_temperature",
    }

    result: dict[str, Any] = {}
    for env_name, field in mapping.items():
        if env_name not in os.environ:
            continue
        value = os.environ[env_name]
        if field in int_fields:
            result[field] = int(value)
        elif field in float_fields:
            result[field] = float(value)
        else:
            result[field] = value
    return result


__all__ = ["Settings", "SettingsError", "SettingsLoadResult", "load_settings"]
