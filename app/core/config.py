import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = "gemini-2.5-flash"
    # Bengaluru, used when the device does not share its location
    FALLBACK_LATITUDE: float = 12.97
    FALLBACK_LONGITUDE: float = 77.59
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024
    MAX_CHAT_SESSIONS: int = 1000


settings = Settings()
