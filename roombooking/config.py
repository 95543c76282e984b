from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ROOMBOOKING_",
        env_file=".env",
        extra="ignore",
    )

    database_url: str = "sqlite:///./data/rooms_booking.db"

    # JWT configuration
    secret_key: str = "secure-secret-key-1234567890"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    min_booking_minutes: int = 30
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
