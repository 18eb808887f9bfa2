from pydantic_settings import BaseSettings
from typing import List, Dict, Any
import json
from pathlib import Path


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        # Try JSON parsing first
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        # Fall back to comma-separated
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    # ==========================================
    # Application
    # ==========================================
    APP_NAME: str = "StudyFlow"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    API_PREFIX: str = "/api"

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    # CORS (stored as comma-separated string, parsed to list)
    CORS_ORIGINS_STR: str = "http://localhost:3000,http://localhost:3001,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return parse_cors_origins(self.CORS_ORIGINS_STR)

    # ==========================================
    # Logging
    # ==========================================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # Empty disables the rotating file handler

    # ==========================================
    # Storage / Current user
    # ==========================================
    # There is no login flow: every request acts on behalf of this user
    CURRENT_USER_ID: int = 1
    SEED_SAMPLE_DATA: bool = True
    MAX_REQUEST_SIZE_BYTES: int = 1024 * 1024  # 1MB

    # ==========================================
    # Pomodoro defaults
    # ==========================================
    POMODORO_MINUTES: int = 25
    SHORT_BREAK_MINUTES: int = 5
    LONG_BREAK_MINUTES: int = 15
    LONG_BREAK_INTERVAL: int = 4
    AUTO_START_BREAKS: bool = False
    AUTO_START_POMODOROS: bool = False
    TIMER_HISTORY_SIZE: int = 100

    # ==========================================
    # Views
    # ==========================================
    UPCOMING_DEADLINES_LIMIT: int = 5
    DEFAULT_GOAL_COLOR: str = "#6C5CE7"

    # Base directory
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def get_pomodoro_defaults(self) -> Dict[str, Any]:
        """Pomodoro timer defaults as keyword arguments for PomodoroSettings"""
        return {
            "pomodoro_minutes": self.POMODORO_MINUTES,
            "short_break_minutes": self.SHORT_BREAK_MINUTES,
            "long_break_minutes": self.LONG_BREAK_MINUTES,
            "long_break_interval": self.LONG_BREAK_INTERVAL,
            "auto_start_breaks": self.AUTO_START_BREAKS,
            "auto_start_pomodoros": self.AUTO_START_POMODOROS,
        }


# Create settings instance
settings = Settings()
