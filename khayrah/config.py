import os
from dataclasses import dataclass

from dotenv import load_dotenv

from khayrah.errors import ConfigError

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.4

load_dotenv()


@dataclass(frozen=True)
class Settings:
    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE


def load_cors_origins() -> list[str]:
    """Comma-separated KHAYRAH_CORS_ORIGINS, or every origin when unset."""
    raw = os.getenv("KHAYRAH_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def load_settings() -> Settings:
    api_key = os.getenv("GEMINI_AI_API_KEY")
    if not api_key:
        raise ConfigError("GEMINI_AI_API_KEY IS NOT SET")

    raw_temperature = os.getenv("KHAYRAH_TEMPERATURE")
    try:
        temperature = float(raw_temperature) if raw_temperature else DEFAULT_TEMPERATURE
    except ValueError as e:
        raise ConfigError(f"KHAYRAH_TEMPERATURE is not a number: {raw_temperature!r}") from e

    return Settings(
        api_key=api_key,
        model=os.getenv("KHAYRAH_MODEL") or DEFAULT_MODEL,
        temperature=temperature,
    )
