from __future__ import annotations

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    platform: str = "prod"
    db_url: str = "postgresql+asyncpg://localhost:5432/chirpy"

    filepath_root: str = "."
    port: int = 8080

    cors_origins: str = "*"

    log_level: str = "INFO"
    log_json: bool = False

    @property
    def is_dev(self) -> bool:
        return self.platform.strip().lower() == "dev"

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        frozen = True
