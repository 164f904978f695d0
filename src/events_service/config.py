"""Configuration settings for Events Service."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Auth
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"

    # Neo4j
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = Field(3000, validation_alias=AliasChoices("api_port", "port"))
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Service
    service_name: str = "events-service"
    service_version: str = "0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
