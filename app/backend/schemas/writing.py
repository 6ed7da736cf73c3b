from pydantic import BaseModel, Field
from typing import Any, List, Optional

class TextRequest(BaseModel):
    text: Optional[str] = Field(None, description="Text to process")

class SummarizeRequest(TextRequest):
    length: Optional[Any] = Field("medium", description="Summary length: short, medium or detailed")

class TransformResponse(BaseModel):
    original: str
    result: str
    provider: str

class SummarizeResponse(TransformResponse):
    length: Optional[Any] = None

class ProviderDetails(BaseModel):
    name: str
    free: bool
    description: str

class ProviderInfoResponse(BaseModel):
    current: str
    info: ProviderDetails
    available: List[str]

class HealthResponse(BaseModel):
    status: str
    provider: str
    timestamp: str
