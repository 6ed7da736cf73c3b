"""
AI Writing Assistant Services

This module provides the writing operations of the assistant:
- Grammar fixing, writing improvement, summarizing and shortening
- A local demo engine that needs no API key
- Remote providers backed by OpenAI, Groq or Google Gemini
"""

from .operations import Operation, SummaryLength, build_user_prompt
from .transform_engine import transform
from .providers import (
    WritingProvider,
    DemoProvider,
    OpenAIProvider,
    GroqProvider,
    GeminiProvider,
    PROVIDER_INFO,
    create_provider
)
from .service_manager import WritingServiceManager, writing_service_manager
from .config import AIServiceConfig, ai_config

__all__ = [
    "Operation",
    "SummaryLength",
    "build_user_prompt",
    "transform",
    "WritingProvider",
    "DemoProvider",
    "OpenAIProvider",
    "GroqProvider",
    "GeminiProvider",
    "PROVIDER_INFO",
    "create_provider",
    "WritingServiceManager",
    "writing_service_manager",
    "AIServiceConfig",
    "ai_config"
]
