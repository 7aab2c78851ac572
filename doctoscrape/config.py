"""Configuration management from environment variables."""
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

__version__ = "0.1.0"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    # Doctolib
    BASE_URL: str = os.getenv("BASE_URL", "https://www.doctolib.fr")
    VISIT_MOTIVE_IDS: list[str] = [
        motive.strip()
        for motive in os.getenv("VISIT_MOTIVE_IDS", "6970,7005").split(",")
        if motive.strip()
    ]
    SPECIALITY_ID: int = int(os.getenv("SPECIALITY_ID", "5494"))
    DETAIL_LIMIT: int = int(os.getenv("DETAIL_LIMIT", "4"))
    FORCE_MAX_LIMIT: int = int(os.getenv("FORCE_MAX_LIMIT", "2"))

    # Scraper
    CONCURRENCY: int = int(os.getenv("CONCURRENCY", "20"))
    TIMEOUT: float = float(os.getenv("TIMEOUT", "20"))
    USER_AGENT: str = os.getenv("USER_AGENT", f"doctoscrape/{__version__}")
    SKIP_MALFORMED_IDS: bool = _env_bool("SKIP_MALFORMED_IDS")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        errors = []
        if not cls.BASE_URL.startswith(("http://", "https://")):
            errors.append("BASE_URL must be an http(s) URL")
        if not cls.VISIT_MOTIVE_IDS:
            errors.append("VISIT_MOTIVE_IDS must list at least one id")
        if cls.TIMEOUT <= 0:
            errors.append("TIMEOUT must be positive")
        if cls.CONCURRENCY <= 0:
            errors.append("CONCURRENCY must be positive")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")


config = Config()
