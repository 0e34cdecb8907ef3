from enum import Enum
from typing import Union

from pydantic import BaseModel as PydanticBaseModel


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class Notification(PydanticBaseModel):
    level: NotificationLevel
    message: str


class ParaphraseSuccess(PydanticBaseModel):
    text: str


class ParaphraseFailure(PydanticBaseModel):
    reason: str


ParaphraseResult = Union[ParaphraseSuccess, ParaphraseFailure]
