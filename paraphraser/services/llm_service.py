from abc import ABC, abstractmethod
from typing import Any, Dict

from paraphraser.models.completion import CompletionPayload


class UpstreamError(Exception):
    """The completion provider could not produce a usable response."""


class UpstreamTimeout(UpstreamError):
    pass


class UpstreamStatusError(Exception):
    """The provider answered with an error status and a JSON body, both passed through unchanged."""

    def __init__(self, status_code: int, body: Any):
        super().__init__(f"Completion provider returned status {status_code}")
        self.status_code = status_code
        self.body = body


class LLMServiceBase(ABC):
    @abstractmethod
    async def complete(self, payload: CompletionPayload) -> Dict[str, Any]:
        """Send the payload and return the provider's JSON body untouched."""
        pass

    async def close(self) -> None:
        pass
