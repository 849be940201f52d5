# src/reader_kit/llms/factory.py

import logging
import os
from collections.abc import Mapping

from reader_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import API_KEY_ENV_VARS, LLMConfig
from .service import LLMTextService

logger = logging.getLogger(__name__)


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create an LLM client from config.

    Args:
        config: LLM configuration specifying provider, model, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured LLMClient implementation.

    Raises:
        ValueError: If provider is unknown.
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(
            api_key=config.api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")


def create_text_service(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    environ: Mapping[str, str] | None = None,
) -> LLMTextService | None:
    """Create the text service, or None when no API key is available.

    A missing key disables AI features; it is not an error.

    Example:
        >>> config = LLMConfig(provider="openai", model="gpt-4o-mini")
        >>> service = create_text_service(config)
        >>> if service is not None:
        ...     text = await service.generate("Explain this passage")
    """
    if config.provider not in API_KEY_ENV_VARS:
        raise ValueError(f"Unknown LLM provider: {config.provider}")

    env = os.environ if environ is None else environ
    api_key = config.api_key or env.get(API_KEY_ENV_VARS[config.provider])
    if not api_key:
        logger.warning(
            "%s not set. AI features will be disabled.",
            API_KEY_ENV_VARS[config.provider],
        )
        return None

    client = create_llm_client(
        LLMConfig(
            provider=config.provider,
            model=config.model,
            api_key=api_key,
            timeout=config.timeout,
            max_retries=config.max_retries,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        ),
        metrics_hook=metrics_hook,
    )
    return LLMTextService(
        client, temperature=config.temperature, max_tokens=config.max_tokens
    )
