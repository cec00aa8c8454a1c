from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./splitledger.db"
    DB_CONNECT_RETRIES: int = 5

    SETTLE_EPSILON: float = 0.0001
    DISPLAY_PLACES: int = 2
    SORT_BY_MAGNITUDE: bool = False
    DEFAULT_CURRENCY: str = "INR"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
