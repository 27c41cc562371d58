from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_CATEGORY


class Settings(BaseSettings):
    openai_api_key: SecretStr
    pinecone_api_key: SecretStr

    # Index configuration (passed verbatim to create_index_for_model)
    index_name: str = "hr-knowledge-base"
    index_cloud: str = "aws"
    index_region: str = "us-east-1"
    embedding_model: str = "text-embedding-3-small"
    embed_text_field: str = "content"
    index_namespace: str = "__default__"

    document_category: str = DEFAULT_CATEGORY

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

    @property
    def field_map(self) -> dict[str, str]:
        return {"text": self.embed_text_field}


@lru_cache
def get_settings() -> Settings:
    return Settings()
