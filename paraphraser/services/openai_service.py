from typing import Any, Dict, Optional

import httpx
import openai
import structlog

from paraphraser.models.completion import CompletionPayload
from paraphraser.services.llm_service import LLMServiceBase, UpstreamError, UpstreamStatusError, UpstreamTimeout
from paraphraser.settings import Settings

logger = structlog.get_logger(__name__)


class AsyncOpenAIService(LLMServiceBase):
    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.client = openai.AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.request_timeout,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, payload: CompletionPayload) -> Dict[str, Any]:
        body = payload.to_request_body()
        try:
            raw_response = await self.client.chat.completions.with_raw_response.create(
                model=body["model"],
                messages=body["messages"],
                temperature=body["temperature"],
                max_tokens=body["max_tokens"],
            )
            return raw_response.http_response.json()
        except openai.APITimeoutError as e:
            raise UpstreamTimeout("Completion provider timed out") from e
        except openai.APIStatusError as e:
            logger.warning("Provider returned an error", status_code=e.status_code)
            try:
                error_body = e.response.json()
            except ValueError:
                raise UpstreamError(f"Completion provider returned status {e.status_code}") from e
            raise UpstreamStatusError(e.status_code, error_body) from e
        except openai.APIConnectionError as e:
            raise UpstreamError("Completion provider is unreachable") from e
        # Undecodable bytes raise UnicodeDecodeError, which is a ValueError but not a JSONDecodeError
        except ValueError as e:
            raise UpstreamError("Completion provider returned a non-JSON body") from e

    async def close(self) -> None:
        await self.client.close()
