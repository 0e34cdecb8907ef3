from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paraphraser.api import paraphrase_router
from paraphraser.services.llm_service import LLMServiceBase
from paraphraser.services.openai_service import AsyncOpenAIService
from paraphraser.settings import Settings

logger = structlog.get_logger(__name__)


def create_app(settings: Settings, llm_service: Optional[LLMServiceBase] = None) -> FastAPI:
    if not settings.debug and settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=1.0,
            profiles_sample_rate=1.0,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Relay started", model=settings.completion.model, base_url=settings.openai_base_url)
        try:
            yield
        finally:
            await app.state.llm_service.close()

    app = FastAPI(title="Paraphraser", lifespan=lifespan)
    app.state.settings = settings
    app.state.llm_service = llm_service or AsyncOpenAIService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(paraphrase_router)
    return app


def get_app() -> FastAPI:
    # Settings() raises when OPENAI_API_KEY is missing, so an unconfigured relay never boots
    return create_app(Settings())


if __name__ == "__main__":
    import uvicorn

    _settings = Settings()
    uvicorn.run(create_app(_settings), host="0.0.0.0", port=8123)
