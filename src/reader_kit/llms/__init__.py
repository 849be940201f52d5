# src/reader_kit/llms/__init__.py

"""Generative text layer for reader-kit.

Provides a thin, stateless abstraction over LLM providers and the
text-in/text-out service the reading assistant talks to.

Design principles:
- Stateless: Every call receives full message list
- Transport only: Retries only on network/rate-limit errors
- No behavior: No loops, no prompt fixing, no "smart" retries
- No leakage: Provider objects never escape the adapter

Example:
    >>> from reader_kit.llms import LLMConfig, create_text_service
    >>>
    >>> service = create_text_service(LLMConfig(provider="openai", model="gpt-4o-mini"))
    >>> if service is not None:
    ...     print(await service.generate("Hello!"))
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import LLMConfig
from .factory import create_llm_client, create_text_service
from .service import LLMTextService, TextService

__all__ = [
    # Factory
    "create_llm_client",
    "create_text_service",
    # Protocols
    "LLMClient",
    "TextService",
    # Service
    "LLMTextService",
    # Config
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
