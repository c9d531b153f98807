"""Configuration for the imgsniff command line."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Runtime settings read from the environment."""

    # Logging
    LOG_LEVEL: str = os.getenv("IMGSNIFF_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv("IMGSNIFF_LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")

    # Output
    JSON_INDENT: int = int(os.getenv("IMGSNIFF_JSON_INDENT", "2"))


config = Config()
