import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from api import deps
from core.ai.operations import Operation
from core.ai.service_manager import WritingServiceManager
from core.exceptions import WritingAssistantError
from schemas.writing import (
    HealthResponse,
    ProviderInfoResponse,
    SummarizeRequest,
    SummarizeResponse,
    TextRequest,
    TransformResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_text(text: Optional[str]) -> str:
    if not text or not text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    return text


async def _process(
    manager: WritingServiceManager,
    text: str,
    operation: Operation,
    options: Optional[Dict[str, Any]] = None
) -> str:
    try:
        return await manager.process_text(text, operation, options)
    except WritingAssistantError as e:
        logger.error(f"{operation.value.capitalize()} processing error: {e.message}")
        raise HTTPException(status_code=500, detail=e.message or "Failed to process text")
    except Exception as e:
        logger.exception(f"{operation.value.capitalize()} processing error")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to process text")


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Report service status and the active provider.
    """
    return await manager.get_health_status()


@router.get("/provider", response_model=ProviderInfoResponse)
async def provider_info(
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Describe the active provider and list the available ones.
    """
    return manager.get_provider_info()


@router.post("/grammar", response_model=TransformResponse)
async def fix_grammar(
    request: TextRequest,
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Fix grammar and spelling.
    """
    text = _require_text(request.text)
    result = await _process(manager, text, Operation.GRAMMAR)
    return {"original": text, "result": result, "provider": manager.provider_name}


@router.post("/improve", response_model=TransformResponse)
async def improve_writing(
    request: TextRequest,
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Make the text clearer and more professional.
    """
    text = _require_text(request.text)
    result = await _process(manager, text, Operation.IMPROVE)
    return {"original": text, "result": result, "provider": manager.provider_name}


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_text(
    request: SummarizeRequest,
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Summarize the text; ``length`` is short, medium or detailed.
    """
    text = _require_text(request.text)
    result = await _process(manager, text, Operation.SUMMARIZE, {"length": request.length})
    return {
        "original": text,
        "result": result,
        "length": request.length,
        "provider": manager.provider_name
    }


@router.post("/shorten", response_model=TransformResponse)
async def shorten_text(
    request: TextRequest,
    manager: WritingServiceManager = Depends(deps.get_service_manager),
):
    """
    Make the text shorter while keeping its meaning.
    """
    text = _require_text(request.text)
    result = await _process(manager, text, Operation.SHORTEN)
    return {"original": text, "result": result, "provider": manager.provider_name}
