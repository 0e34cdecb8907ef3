from pydantic import BaseModel as PydanticBaseModel

DEFAULT_PARAPHRASE_TEMPLATE = 'Paraphrase "{text}" using {mode} mode. Do not add any additional word.'


class PromptsConfig(PydanticBaseModel):
    paraphrase_template: str = DEFAULT_PARAPHRASE_TEMPLATE
