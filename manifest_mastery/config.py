"""Application configuration."""

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Wizard
    max_goals: int = int(os.getenv("MAX_GOALS", "3"))
    step_sequence: str = os.getenv("STEP_SEQUENCE", "full")  # "full" or "compact"
    auto_generate: bool = os.getenv("AUTO_GENERATE", "true").lower() in ("1", "true", "yes")
    max_sessions: int = int(os.getenv("MAX_SESSIONS", "1000"))  # oldest evicted past this

    # Vision board
    max_upload_bytes: int = int(
        os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))
    )  # 10 MiB
    board_width: int = int(os.getenv("BOARD_WIDTH", "1080"))
    board_height: int = int(os.getenv("BOARD_HEIGHT", "1920"))
    board_title: str = os.getenv("BOARD_TITLE", "Vision Board 2024")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False


settings = Settings()
