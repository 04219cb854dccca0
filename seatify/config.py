from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./seatify.db"
    APP_BASE_URL: str = "https://seatify.app"
    ICS_OUTPUT_DIR: str = "."
    LOG_LEVEL: str | None = None


settings = Settings()
