from fastapi import Request

from paraphraser.services.llm_service import LLMServiceBase
from paraphraser.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_service(request: Request) -> LLMServiceBase:
    return request.app.state.llm_service
