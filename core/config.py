import os
from logging.config import dictConfig

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        # Parsing
        self.MAX_DIFF_LENGTH: int = int(os.getenv("MAX_DIFF_LENGTH", "5000000"))
        self.ALLOW_ORPHAN_LINES: bool = os.getenv("ALLOW_ORPHAN_LINES", "false").lower() == "true"

        # Server
        self.PORT: int = int(os.getenv("PORT", "8080"))
        self.HOST: str = os.getenv("HOST", "0.0.0.0")

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate_settings(self):
        if self.MAX_DIFF_LENGTH <= 0:
            raise ValueError("MAX_DIFF_LENGTH must be a positive number of characters.")


settings = Settings()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "hunk_parser": {"handlers": ["default"], "level": settings.LOG_LEVEL, "propagate": False},
        "uvicorn.error": {"level": "INFO"},
        "uvicorn.access": {"handlers": ["default"], "level": "INFO", "propagate": False},
    },
}

def setup_logging():
    settings.validate_settings()
    dictConfig(LOGGING_CONFIG)
