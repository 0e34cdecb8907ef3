from pydantic import BaseModel


class CompletionConfig(BaseModel):
    model: str = "gpt-3.5-turbo"
    temperature: float = 1
    max_tokens: int = 500
