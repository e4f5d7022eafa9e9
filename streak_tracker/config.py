# streak_tracker/config.py
from pydantic_settings import BaseSettings
from typing import Optional, Set
from pydantic import Field

class Settings(BaseSettings):
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./streaks.db")
    SQL_ECHO: bool = Field(False)

    # IANA zone used to turn timestamps into calendar days
    CALENDAR_TIMEZONE: str = Field("UTC")

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = Field("gpt-4o")

    LOG_LEVEL: str = Field("INFO")

    # Comma-separated origins. If empty or missing → no CORS middleware.
    CORS_ORIGINS: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        url = self.DATABASE_URL
        # Ensure asyncpg is used
        if url.startswith("postgresql://") and "+asyncpg" not in url:
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @property
    def allowed_origins(self) -> Optional[Set[str]]:
        """
        Returns:
          - None → CORS disabled
          - Set[str] → only these origins allowed
        """
        if not self.CORS_ORIGINS:
            return None
        return {o.strip().rstrip("/") for o in self.CORS_ORIGINS.split(",") if o.strip()}

settings = Settings()
