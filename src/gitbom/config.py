"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitbom.domain.value_objects import HashAlgorithm


class Settings(BaseSettings):
    """GitBOM settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GITBOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hashing
    hash_algorithm: HashAlgorithm = Field(
        default=HashAlgorithm.SHA256,
        description="Digest used for gitoids (sha1 or sha256)",
    )
    chunk_size: int = Field(
        default=4096,
        gt=0,
        description="Read size in bytes when hashing streams",
    )
    strict_length: bool = Field(
        default=False,
        description="Raise when a stream's length differs from the declared length",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def _parse_hash_algorithm(cls, value: object) -> object:
        return HashAlgorithm(value) if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
