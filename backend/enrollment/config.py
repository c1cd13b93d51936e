# enrollment/config.py
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./student_records.db"
    DATABASE_ECHO: bool = False

    # HTTP
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]  # Next.js admin frontend

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
