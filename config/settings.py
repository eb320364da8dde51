import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env next to this file, then the process environment
BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    REPLICATE_API_TOKEN: str | None = os.getenv("REPLICATE_API_TOKEN")
    REPLICATE_MODEL: str = (
        "stability-ai/stable-video-diffusion:"
        "3f0457e4619daac51203dedb472816fd4af51f3149fa7a9e0b5ffcf1b8172438"
    )

    BACKEND_URL: str = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")
    BACKEND_HOST: str = os.getenv("BACKEND_HOST", "0.0.0.0")
    BACKEND_PORT: int = int(os.getenv("BACKEND_PORT", "8000"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    UI_LANG: str = os.getenv("UI_LANG", "en")  # en | fa

settings = Settings()
