# image_store/config/settings.py
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 📁 Raiz do storage (todos os paths relativos são resolvidos contra ela)
    image_storage_path: str = "./uploads"

    host: str = "0.0.0.0"
    port: int = 3000

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    max_file_size_mb: int = 10

    # origens do dev server do front (separadas por vírgula)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("image_storage_path", "environment", "log_level", "cors_origins", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @property
    def max_file_size_bytes(self) -> int:
        return max(1, self.max_file_size_mb) * 1024 * 1024

    @property
    def cors_origin_list(self) -> list[str]:
        parts = [p.strip() for p in (self.cors_origins or "").split(",")]
        return [p for p in parts if p]


@lru_cache
def get_settings() -> Settings:
    return Settings()
