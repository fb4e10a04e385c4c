import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MissingCredentialsError


@dataclass
class OpenAIConfig:
    api_key: str
    model: str = "gpt-4o-mini"
    temperature: float = 0.3
    max_tokens: int = 800
    timeout: float = 60.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "OpenAIConfig":
        if environ is None:
            environ = os.environ

        api_key = environ.get("OPENAI_API_KEY", "")
        if not api_key:
            raise MissingCredentialsError("OPENAI_API_KEY is not configured.")
        return cls(api_key=api_key)
