# src/reader_kit/llms/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["openai", "anthropic"]

# Environment variable consulted when no explicit key is configured.
API_KEY_ENV_VARS: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. The provider's API key variable is read only by
    `create_text_service`, to decide whether AI features are enabled.
    """

    provider: Provider
    model: str
    api_key: str | None = None
    timeout: float = 30.0
    max_retries: int = 3
    max_tokens: int | None = None
    temperature: float = 0.0
