from typing import Any, Dict, Optional

import httpx
import structlog

logger = structlog.get_logger(__name__)


class RelayError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RelayClient:
    """Posts prompts to the paraphrase relay endpoint."""

    def __init__(
            self,
            relay_url: str,
            timeout: float = 60,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.relay_url = relay_url
        self.timeout = timeout
        self._transport = transport

    async def paraphrase(self, prompt: str) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.relay_url, json={"prompt": prompt})
            except httpx.TimeoutException as e:
                raise RelayError("The paraphrase request timed out") from e
            except httpx.HTTPError as e:
                raise RelayError(f"Could not reach the paraphrase service: {e}") from e

        if response.is_error:
            logger.warning("Relay returned an error", status_code=response.status_code)
            raise RelayError(self._error_detail(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise RelayError("The paraphrase service returned an invalid response") from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        # Relay failures carry "detail"; provider errors passed through carry "error.message"
        try:
            data = response.json()
            detail = data.get("detail") or (data.get("error") or {}).get("message")
        except (ValueError, AttributeError):
            detail = None
        return detail if isinstance(detail, str) and detail else f"The paraphrase service returned status {response.status_code}"
