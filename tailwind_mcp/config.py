"""Application configuration. All env vars defined here with defaults."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class TailwindMCPConfig(BaseSettings):
    # ── App ──
    app_name: str = "tailwind-mcp"
    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG_MODE", "TAILWIND_MCP_DEBUG"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "TAILWIND_MCP_LOG_LEVEL"))

    # ── LLM (litellm) ──
    default_llm_model: str = "gemini/gemini-1.5-flash"
    llm_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "TAILWIND_MCP_LLM_API_KEY"),
    )
    llm_max_tokens: int = 2048
    llm_temperature: float = 0.7
    ollama_base_url: str = "http://localhost:11434"

    # ── Enrichment ──
    ai_timeout_seconds: float = 5.0            # bound on one enrichment round trip

    model_config = {
        "env_prefix": "TAILWIND_MCP_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }


config = TailwindMCPConfig()
