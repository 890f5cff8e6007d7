# File: accounts_api/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

from accounts_api.core.security import DEFAULT_WORK_FACTOR, MIN_WORK_FACTOR


class Settings(BaseModel):
    # env-derived defaults go through the validators below
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Accounts API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = os.getenv(
        "BACKEND_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./accounts.db")

    # Password hashing
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", str(DEFAULT_WORK_FACTOR)))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if v < MIN_WORK_FACTOR:
            raise ValueError(f"bcrypt_rounds must be at least {MIN_WORK_FACTOR}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
