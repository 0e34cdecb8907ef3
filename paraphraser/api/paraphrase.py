from typing import Any, Dict, Optional, Union

import sentry_sdk
import structlog
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from paraphraser.depends.llm import get_llm_service, get_settings
from paraphraser.models.completion import CompletionPayload, ParaphraseRequest
from paraphraser.models.message import UserMessage
from paraphraser.services.llm_service import LLMServiceBase, UpstreamError, UpstreamStatusError, UpstreamTimeout
from paraphraser.settings import Settings

router = APIRouter(prefix="/api", tags=["paraphrase"])

logger = structlog.get_logger(__name__)


def build_payload(prompt: str, settings: Settings) -> CompletionPayload:
    completion = settings.completion
    return CompletionPayload(
        model=completion.model,
        messages=[UserMessage(content=prompt)],
        temperature=completion.temperature,
        max_tokens=completion.max_tokens,
    )


@router.post("/paraphrase", response_model=None)
async def paraphrase(
        request: Optional[ParaphraseRequest] = None,
        settings: Settings = Depends(get_settings),
        llm_service: LLMServiceBase = Depends(get_llm_service),
) -> Union[Dict[str, Any], JSONResponse]:
    if request is None or not request.prompt:
        logger.info("Rejected request without prompt")
        raise HTTPException(status_code=400, detail="No prompt in the request")

    logger.info("Paraphrase requested", prompt_length=len(request.prompt), model=settings.completion.model)
    try:
        return await llm_service.complete(build_payload(request.prompt, settings))
    except UpstreamTimeout as e:
        logger.error("Completion timed out", error=str(e))
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=504, detail=str(e))
    except UpstreamError as e:
        logger.error("Completion failed", error=str(e))
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=502, detail=str(e))
    except UpstreamStatusError as e:
        logger.warning("Passing provider error through", status_code=e.status_code)
        return JSONResponse(content=e.body, status_code=e.status_code)
