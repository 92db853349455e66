from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    """

    DEFAULT_BREED: str = "NOVOgen Tinted"
    UPCOMING_LOOKAHEAD_DAYS: int = 3
    REDIS_URL: Optional[str] = None
    STORE_KEY_PREFIX: str = "weighings"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
