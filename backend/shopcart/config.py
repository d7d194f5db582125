import os
import tempfile
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8080
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    SESSION_TOKEN_BYTES: int = 32
    BCRYPT_ROUNDS: int = 12
    LOCK_DIR: str = os.path.join(tempfile.gettempdir(), "shopcart_locks")
    LOCK_TIMEOUT_SECONDS: float = 10.0
    SEED_SAMPLE_DATA: bool = True
    RESET_DB: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
