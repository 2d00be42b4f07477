"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import yaml

from jobboard_ai.errors import ConfigError

API_KEY_ENV = "ANTHROPIC_API_KEY"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    timeout: int = 60
    default_max_tokens: int = 4096

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if self.default_max_tokens < 1:
            raise ValueError(
                f"llm.default_max_tokens must be positive, got {self.default_max_tokens}"
            )


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    api_tokens: dict[str, str] = field(default_factory=dict)  # token -> user id

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"server.port must be between 1 and 65535, got {self.port}")


@dataclass(frozen=True)
class UsageConfig:
    enabled: bool = True
    db_path: str = "~/.jobboard-ai/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    server_raw = dict(raw.get("server") or {})
    # YAML may hand back non-string tokens (e.g. numbers)
    tokens = server_raw.pop("api_tokens", None) or {}
    server_raw["api_tokens"] = {str(k): str(v) for k, v in tokens.items()}

    return AppConfig(
        llm=LLMConfig(**(raw.get("llm") or {})),
        server=ServerConfig(**server_raw),
        usage=UsageConfig(**(raw.get("usage") or {})),
    )


def require_api_key(environ: Mapping[str, str] | None = None) -> str:
    """Return the model-provider API key, failing fast when it is missing."""
    env = os.environ if environ is None else environ
    key = (env.get(API_KEY_ENV) or "").strip()
    if not key:
        raise ConfigError(f"{API_KEY_ENV} is not set; the AI endpoints cannot start")
    return key
