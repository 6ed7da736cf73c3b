"""
Writing Service Manager

This module provides a unified interface to the active text provider. The
provider is chosen once, when the manager is initialized, from configuration;
request handlers never branch on the provider themselves.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
import logging

from .operations import Operation
from .providers import PROVIDER_INFO, WritingProvider, create_provider

logger = logging.getLogger(__name__)


class WritingServiceManager:
    """Owns the active text provider and routes operations to it."""

    def __init__(self, provider: Optional[WritingProvider] = None):
        """
        Initialize the service manager.

        Args:
            provider: Provider to use; if omitted one is built from configuration
        """
        self.provider: Optional[WritingProvider] = provider
        self._initialized = provider is not None

    async def initialize(self):
        """Select the configured provider."""
        if self._initialized:
            return

        self.provider = create_provider()
        self._initialized = True
        logger.info(f"Using AI provider: {self.provider_name.upper()}")

        if self.provider_name == "demo":
            logger.info("Demo mode active; set AI_PROVIDER=groq with GROQ_API_KEY for real AI results")

    @property
    def provider_name(self) -> str:
        return self.provider.name if self.provider else "demo"

    async def process_text(
        self,
        text: str,
        operation: Operation,
        options: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Run a writing operation on text with the active provider.

        Args:
            text: Text to process, already validated as non-empty
            operation: Operation to perform
            options: Operation options (``length`` for summaries)

        Returns:
            Transformed text

        Raises:
            ProviderError: If the provider fails or is not configured
        """
        await self.initialize()
        return await self.provider.process(text, operation, options or {})

    def get_provider_info(self) -> Dict[str, Any]:
        """Describe the active provider and list the known ones."""
        return {
            "current": self.provider_name,
            "info": PROVIDER_INFO.get(self.provider_name, PROVIDER_INFO["demo"]),
            "available": list(PROVIDER_INFO.keys())
        }

    async def get_health_status(self) -> Dict[str, Any]:
        """
        Get health status of the active provider.

        Returns:
            Dictionary with overall status, provider id and timestamp
        """
        await self.initialize()
        healthy = await self.provider.health_check()
        return {
            "status": "ok" if healthy else "degraded",
            "provider": self.provider_name,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self):
        """Release provider resources."""
        if self.provider:
            await self.provider.close()
        self._initialized = False
        logger.info("Writing services closed")


# Global service manager instance
writing_service_manager = WritingServiceManager()
