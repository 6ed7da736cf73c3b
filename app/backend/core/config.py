from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Base
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Writing Assistant"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Provider credentials
    OPENAI_API_KEY: Optional[str] = None
    GROQ_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"

settings = Settings()
