from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from paraphraser.models.config import CompletionConfig
from paraphraser.models.prompt import PromptsConfig
from paraphraser.utils.filesystem import get_project_root


def _yaml_sources(
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
) -> tuple[PydanticBaseSettingsSource, ...]:
    return init_settings, env_settings, dotenv_settings, YamlConfigSettingsSource(settings_cls)


class Settings(BaseSettings):
    """Relay configuration. Building it without an API key fails, so the relay never starts unconfigured."""
    debug: bool = True
    openai_api_key: str
    openai_base_url: str = "https://api.openai.com/v1"
    request_timeout: float = 60
    sentry_dsn: Optional[str] = None
    cors_origins: List[str] = ["*"]
    completion: CompletionConfig = Field(default_factory=CompletionConfig)

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        yaml_file=get_project_root() / "config.yaml",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return _yaml_sources(settings_cls, init_settings, env_settings, dotenv_settings)


class ClientSettings(BaseSettings):
    """Front-end configuration. Holds no provider credentials."""
    relay_url: str = "http://localhost:8123/api/paraphrase"
    request_timeout: float = 60
    prompts: PromptsConfig = Field(default_factory=PromptsConfig)

    model_config = SettingsConfigDict(
        env_prefix="PARAPHRASER_",
        env_file=get_project_root() / ".env",
        yaml_file=[get_project_root() / "config.yaml", get_project_root() / "prompts.yaml"],
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return _yaml_sources(settings_cls, init_settings, env_settings, dotenv_settings)
