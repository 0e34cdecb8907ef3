from enum import Enum
from typing import List, Optional

from pydantic import BaseModel as PydanticBaseModel

from paraphraser.models.message import BaseChatMessage


class ParaphraseMode(str, Enum):
    STANDARD = "Standard"
    FORMAL = "Formal"
    CREATIVE = "Creative"
    FUN = "Fun"
    FLUENT = "Fluent"


class ParaphraseRequest(PydanticBaseModel):
    # Optional so that a missing prompt is answered with 400 by the handler, not 422
    prompt: Optional[str] = None


class CompletionPayload(PydanticBaseModel):
    model: str
    messages: List[BaseChatMessage]
    temperature: float
    max_tokens: int

    def to_request_body(self) -> dict:
        return self.model_dump(mode="json")
