import os
from pydantic import BaseModel
from dotenv import load_dotenv
from functools import lru_cache
from typing import List, Optional

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _origins() -> List[str]:
    origins_env = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    return [o.strip() for o in origins_env.split(",") if o.strip()] or [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


class Settings(BaseModel):
    PROJECT_NAME: str = "NutriPlan API"
    SECRET_KEY: str = os.getenv("JWT_SECRET_KEY") or os.getenv("SECRET_KEY") or "change-me"
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
    CORS_ALLOW_ORIGINS: List[str] = _origins()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Structured generation
    MEALPLAN_PROVIDER: str = os.getenv("MEALPLAN_PROVIDER", "gemini").strip().lower()
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "")
    OPENAI_TEMPERATURE: Optional[float] = _optional_float("OPENAI_TEMPERATURE")
    GENERATION_TIMEOUT: float = float(os.getenv("MEALPLAN_TIMEOUT", "30"))
    GENERATION_RETRIES: int = int(os.getenv("MEALPLAN_RETRIES", "1"))

    # Plan client
    API_BASE_URL: str = os.getenv("BACKEND_URL", "http://localhost:5000/api")


@lru_cache
def get_settings():
    return Settings()
