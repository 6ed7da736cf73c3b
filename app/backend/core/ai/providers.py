"""
Text Providers

Each provider turns ``(text, operation, options)`` into transformed text. The
demo provider runs the local transform engine; the others forward the text to
a remote language-model API together with an operation-specific instruction.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple, Type

import aiohttp
import groq
import openai

from core.config import Settings, settings as default_settings
from core.exceptions import ProviderError, ProviderNotConfiguredError
from .config import AIServiceConfig, ai_config as default_ai_config
from .operations import Operation, build_user_prompt, get_system_prompt
from .transform_engine import transform

logger = logging.getLogger(__name__)


PROVIDER_INFO: Dict[str, Dict[str, Any]] = {
    "openai": {"name": "OpenAI GPT-3.5", "free": False, "description": "Premium AI with best quality"},
    "groq": {"name": "Groq (Llama 3.1)", "free": True, "description": "Fast & free AI powered by Llama"},
    "gemini": {"name": "Google Gemini", "free": True, "description": "Google AI with free tier"},
    "demo": {"name": "Demo Mode", "free": True, "description": "Basic transformations (no API needed)"},
}

DEFAULT_PROVIDER = "demo"


class WritingProvider(ABC):
    """Strategy interface for anything that can service a writing operation."""

    name: str = ""
    display_name: str = ""

    @property
    def info(self) -> Dict[str, Any]:
        return PROVIDER_INFO.get(self.name, PROVIDER_INFO[DEFAULT_PROVIDER])

    @abstractmethod
    async def process(
        self,
        text: str,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Transform text according to the requested operation.

        Raises:
            ProviderNotConfiguredError: If the provider has no API key
            ProviderError: If the provider fails to produce a result
        """

    async def health_check(self) -> bool:
        return True

    async def close(self):
        pass


class DemoProvider(WritingProvider):
    """Local provider backed by the regex transform engine. Needs no API key."""

    name = "demo"
    display_name = "Demo"

    async def process(
        self,
        text: str,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None
    ) -> str:
        return transform(text, operation, options)


class ChatCompletionProvider(WritingProvider):
    """Base for providers exposing an OpenAI-style chat completions client."""

    error_types: Tuple[Type[BaseException], ...] = ()

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        timeout: float = 60,
        health_check_timeout: float = 5
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.health_check_timeout = health_check_timeout
        self.client = None

    @abstractmethod
    def _create_client(self):
        """Build the SDK client for this provider."""

    def _get_client(self):
        if not self.api_key:
            raise ProviderNotConfiguredError(
                f"{self.display_name} API key not configured", provider=self.name
            )
        if self.client is None:
            self.client = self._create_client()
        return self.client

    async def process(
        self,
        text: str,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None
    ) -> str:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": get_system_prompt(operation)},
                    {"role": "user", "content": build_user_prompt(text, operation, options)},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except self.error_types as e:
            logger.error(f"{self.display_name} request failed: {e}")
            raise ProviderError(
                f"{self.display_name} request failed: {e}", provider=self.name
            ) from e

        return completion.choices[0].message.content or ""

    async def health_check(self) -> bool:
        """
        Check that the provider is reachable with the configured key.

        Returns:
            True if the model listing succeeds, False otherwise
        """
        if not self.api_key:
            return False
        try:
            await asyncio.wait_for(
                self._get_client().models.list(), timeout=self.health_check_timeout
            )
            return True
        except asyncio.TimeoutError:
            logger.error(f"{self.display_name} health check timed out")
            return False
        except self.error_types as e:
            logger.error(f"{self.display_name} health check failed: {e}")
            return False

    async def close(self):
        if self.client is not None:
            await self.client.close()
            self.client = None


class OpenAIProvider(ChatCompletionProvider):
    name = "openai"
    display_name = "OpenAI"
    error_types = (openai.OpenAIError,)

    def _create_client(self) -> openai.AsyncOpenAI:
        return openai.AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)


class GroqProvider(ChatCompletionProvider):
    name = "groq"
    display_name = "Groq"
    error_types = (groq.GroqError,)

    def _create_client(self) -> groq.AsyncGroq:
        return groq.AsyncGroq(api_key=self.api_key, timeout=self.timeout)


class GeminiProvider(WritingProvider):
    """Google Gemini via the ``generateContent`` REST endpoint."""

    name = "gemini"
    display_name = "Gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-1.5-flash",
        api_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60,
        health_check_timeout: float = 5
    ):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.health_check_timeout = health_check_timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create an aiohttp session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(headers={"x-goog-api-key": self.api_key or ""})
        return self.session

    async def process(
        self,
        text: str,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None
    ) -> str:
        if not self.api_key:
            raise ProviderNotConfiguredError("Gemini API key not configured", provider=self.name)

        prompt = f"{get_system_prompt(operation)}\n\n{build_user_prompt(text, operation, options)}"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            session = await self._get_session()
            async with session.post(
                f"{self.api_url}/models/{self.model}:generateContent",
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(f"Gemini API error: {response.status} - {error_text}")
                    raise ProviderError(
                        f"Gemini API error: {response.status}", provider=self.name
                    )
                data = await response.json()
        except asyncio.TimeoutError as e:
            logger.error("Gemini request timed out")
            raise ProviderError("Gemini request timed out", provider=self.name) from e
        except aiohttp.ClientError as e:
            logger.error(f"Gemini connection error: {e}")
            raise ProviderError(f"Gemini request failed: {e}", provider=self.name) from e

        return self._extract_text(data)

    def _extract_text(self, data: Dict[str, Any]) -> str:
        """Concatenate the text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            raise ProviderError("Gemini returned no candidates", provider=self.name)
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts)

    async def health_check(self) -> bool:
        if not self.api_key:
            return False
        try:
            session = await self._get_session()
            async with session.get(
                f"{self.api_url}/models/{self.model}",
                timeout=aiohttp.ClientTimeout(total=self.health_check_timeout)
            ) as response:
                return response.status == 200
        except (asyncio.TimeoutError, aiohttp.ClientError) as e:
            logger.error(f"Gemini health check failed: {e}")
            return False

    async def close(self):
        """Close the aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()


def create_provider(
    name: Optional[str] = None,
    app_settings: Optional[Settings] = None,
    config: Optional[AIServiceConfig] = None
) -> WritingProvider:
    """
    Build the provider selected by configuration.

    Args:
        name: Provider id; defaults to the configured ``AI_PROVIDER``
        app_settings: Application settings holding the API keys
        config: AI provider configuration

    Returns:
        The provider instance. Unknown ids fall back to demo mode.
    """
    app_settings = app_settings or default_settings
    config = config or default_ai_config
    name = (name or config.provider or DEFAULT_PROVIDER).strip().lower()

    if name == "openai":
        return OpenAIProvider(
            app_settings.OPENAI_API_KEY, config.openai_model,
            config.temperature, config.max_tokens, config.request_timeout,
            config.health_check_timeout
        )
    if name == "groq":
        return GroqProvider(
            app_settings.GROQ_API_KEY, config.groq_model,
            config.temperature, config.max_tokens, config.request_timeout,
            config.health_check_timeout
        )
    if name == "gemini":
        return GeminiProvider(
            app_settings.GEMINI_API_KEY, config.gemini_model,
            config.gemini_api_url, config.request_timeout, config.health_check_timeout
        )
    if name != DEFAULT_PROVIDER:
        logger.warning(f"Unknown AI provider '{name}', falling back to demo mode")
    return DemoProvider()
