"""Thin wrapper around litellm for the AI text service.

litellm handles Gemini, Anthropic, OpenAI, Ollama and 100+ providers.
This wrapper adds: credential checks and error normalization into the
AuthenticationError / UpstreamUnavailableError pair that adapters recover from.

Usage:
  client = LLMClient()                          # model + key from settings
  text = await client.generate_content(prompt)
"""

from typing import Optional, Protocol

import litellm

from tailwind_mcp.config import config
from tailwind_mcp.exceptions import AuthenticationError, UpstreamUnavailableError


class AITextService(Protocol):
    """Anything that turns a prompt into text. Tests substitute stubs."""

    async def generate_content(self, prompt: str) -> str: ...


def is_local_model(model: str) -> bool:
    """Return True if the model runs locally via Ollama (no API key required)."""
    return model.startswith("ollama/") or model.startswith("ollama_chat/")


class LLMClient:
    """prompt -> text over litellm.acompletion()."""

    def __init__(
        self,
        model: str = None,
        api_key: Optional[str] = None,
        temperature: float = None,
        max_tokens: int = None,
    ):
        self.model = model or config.default_llm_model
        self.api_key = api_key if api_key is not None else config.llm_api_key
        self.temperature = config.llm_temperature if temperature is None else temperature
        self.max_tokens = config.llm_max_tokens if max_tokens is None else max_tokens
        litellm.drop_params = True  # ignore unsupported params per provider

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key) or is_local_model(self.model)

    async def generate_content(self, prompt: str) -> str:
        """Send a single user prompt and return the completion text.

        Raises:
            AuthenticationError: no key configured, or the provider rejected it
            UpstreamUnavailableError: any other provider failure or an empty reply
        """
        if not self.has_credentials:
            raise AuthenticationError(
                "No AI credential configured (set GEMINI_API_KEY)", model=self.model
            )

        kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if is_local_model(self.model):
            kwargs["api_base"] = config.ollama_base_url

        try:
            response = await litellm.acompletion(**kwargs)
        except litellm.AuthenticationError as e:
            raise AuthenticationError(f"AI backend rejected credentials: {e}", model=self.model) from e
        except Exception as e:
            raise UpstreamUnavailableError(f"AI backend call failed: {e}", model=self.model) from e

        try:
            text = response.choices[0].message.content or ""
        except (AttributeError, IndexError) as e:
            raise UpstreamUnavailableError(f"Malformed AI response: {e}", model=self.model) from e
        if not text.strip():
            raise UpstreamUnavailableError("AI backend returned an empty completion", model=self.model)
        return text.strip()
