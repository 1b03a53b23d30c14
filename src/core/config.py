from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Photo Board"
    LOG_LEVEL: str = "DEBUG"
    ENVIRONMENT: str = "development"
    DATABASE_URL: str = "sqlite+aiosqlite:///./photos.db"

    # Storage
    STORAGE_TYPE: str = "local"  # local
    MEDIA_ROOT: str = "uploads"
    MEDIA_URL: str = "uploads"
    PUBLIC_BASE_URL: str = "http://localhost:8000"

    class Config:
        env_file = ".env"

configs = Settings()
