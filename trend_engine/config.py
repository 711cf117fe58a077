"""Explicit configuration for the trend engine.

``Settings.from_env()`` is the only place that touches the process environment
(after loading a ``.env`` file). Everything downstream receives the object.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_SKILLS_API_URL = "https://linkedin-data-api.p.rapidapi.com/get-profile-data-by-username"
DEFAULT_SKILLS_API_HOST = "linkedin-data-api.p.rapidapi.com"


class ConfigurationError(RuntimeError):
    """Raised when a credential the pipeline cannot run without is missing."""


def _split_origins(raw: str) -> List[str]:
    """Comma-separated origins, trimmed, empties dropped; ``*`` when none remain."""
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


class Settings(BaseModel):
    """Credentials and tunables for one deployment."""

    skills_api_key: Optional[str] = None
    skills_api_url: str = DEFAULT_SKILLS_API_URL
    skills_api_host: str = DEFAULT_SKILLS_API_HOST

    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    llm_model: str = "gpt-4o-mini"
    claude_model: str = "claude-3-5-haiku-latest"
    preferred_api: Literal["openai", "claude"] = "openai"

    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    cache_table: str = "trend_cache"
    cache_path: Path = Field(default_factory=lambda: Path.home() / ".linkedcraft" / "trend_cache.jsonl")

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from ``.env`` plus the process environment."""
        load_dotenv(env_file)
        values = {
            "skills_api_key": os.getenv("SKILLS_API_KEY") or None,
            "skills_api_url": os.getenv("SKILLS_API_URL", DEFAULT_SKILLS_API_URL),
            "skills_api_host": os.getenv("SKILLS_API_HOST", DEFAULT_SKILLS_API_HOST),
            "openai_api_key": os.getenv("OPENAI_API_KEY") or None,
            "anthropic_api_key": os.getenv("ANTHROPIC_API_KEY") or None,
            "supabase_url": os.getenv("SUPABASE_URL") or None,
            "supabase_key": os.getenv("SUPABASE_KEY") or None,
            "cors_origins": _split_origins(os.getenv("CORS_ORIGINS", "*")),
        }
        optional = {
            "llm_model": "LINKEDCRAFT_LLM_MODEL",
            "claude_model": "LINKEDCRAFT_CLAUDE_MODEL",
            "preferred_api": "LINKEDCRAFT_PREFERRED_API",
            "cache_table": "LINKEDCRAFT_CACHE_TABLE",
            "cache_path": "LINKEDCRAFT_CACHE_PATH",
        }
        for field, env_name in optional.items():
            value = os.getenv(env_name)
            if value:
                values[field] = value
        return cls(**values)

    def require_skills_api_key(self) -> str:
        if not self.skills_api_key:
            raise ConfigurationError("SKILLS_API_KEY environment variable not set")
        return self.skills_api_key
