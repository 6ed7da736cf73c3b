"""
AI Provider Configuration

Configuration settings for the text providers: which provider is active,
model names, endpoints, and generation parameters.
"""

from pydantic_settings import BaseSettings


class AIServiceConfig(BaseSettings):
    """Configuration for AI providers."""
    
    # Active provider: openai, groq, gemini or demo
    provider: str = "demo"
    
    # Model Configuration
    openai_model: str = "gpt-3.5-turbo"
    groq_model: str = "llama-3.1-8b-instant"
    gemini_model: str = "gemini-1.5-flash"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    
    # Generation Parameters
    temperature: float = 0.3
    max_tokens: int = 2000
    
    # Request Settings
    request_timeout: int = 60
    health_check_timeout: int = 5
    
    class Config:
        env_prefix = "AI_"
        case_sensitive = False
        env_file = ".env"
        extra = "ignore"


# Global configuration instance
ai_config = AIServiceConfig()

