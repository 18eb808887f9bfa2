"""
CLI Configuration Management
"""

import os
import json
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any

from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CLIConfig:
    """Configuration for the StudyFlow CLI"""

    # API settings
    api_base_url: str = "http://localhost:8000/api"
    timeout: float = 10.0

    # Timer settings (minutes)
    pomodoro_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    long_break_interval: int = 4
    auto_start_breaks: bool = False
    auto_start_pomodoros: bool = False
    record_sessions: bool = True

    # Output settings
    sounds: bool = True
    verbose: bool = False

    # Paths
    config_dir: str = field(default_factory=lambda: str(Path.home() / ".studyflow"))

    def load_from_file(self, config_path: str) -> None:
        """Load configuration from JSON file"""
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                data = json.load(f)
                for key, value in data.items():
                    if hasattr(self, key):
                        setattr(self, key, value)

    def save_to_file(self, config_path: Optional[str] = None) -> None:
        """Save configuration to JSON file"""
        path = Path(config_path or (Path(self.config_dir) / "config.json"))
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load_default(cls) -> "CLIConfig":
        """Defaults, then ~/.studyflow/config.json, then STUDYFLOW_* variables"""
        load_dotenv()

        config = cls()
        default_config_path = Path(config.config_dir) / "config.json"
        if default_config_path.exists():
            config.load_from_file(str(default_config_path))

        # Override with environment variables
        config._load_from_env()

        return config

    def _load_from_env(self) -> None:
        """Load configuration from environment variables"""
        env_mappings = {
            "STUDYFLOW_API_URL": "api_base_url",
            "STUDYFLOW_TIMEOUT": ("timeout", float),
            "STUDYFLOW_POMODORO_MINUTES": ("pomodoro_minutes", int),
            "STUDYFLOW_SHORT_BREAK_MINUTES": ("short_break_minutes", int),
            "STUDYFLOW_LONG_BREAK_MINUTES": ("long_break_minutes", int),
            "STUDYFLOW_LONG_BREAK_INTERVAL": ("long_break_interval", int),
            "STUDYFLOW_AUTO_START_BREAKS": ("auto_start_breaks", _as_bool),
            "STUDYFLOW_AUTO_START_POMODOROS": ("auto_start_pomodoros", _as_bool),
            "STUDYFLOW_RECORD_SESSIONS": ("record_sessions", _as_bool),
            "STUDYFLOW_SOUNDS": ("sounds", _as_bool),
            "STUDYFLOW_VERBOSE": ("verbose", _as_bool),
        }

        for env_var, mapping in env_mappings.items():
            value = os.environ.get(env_var)
            if value:
                if isinstance(mapping, tuple):
                    attr, converter = mapping
                    setattr(self, attr, converter(value))
                else:
                    setattr(self, mapping, value)

    def timer_settings(self) -> Dict[str, Any]:
        """Keyword arguments for PomodoroSettings"""
        return {
            "pomodoro_minutes": self.pomodoro_minutes,
            "short_break_minutes": self.short_break_minutes,
            "long_break_minutes": self.long_break_minutes,
            "long_break_interval": self.long_break_interval,
            "auto_start_breaks": self.auto_start_breaks,
            "auto_start_pomodoros": self.auto_start_pomodoros,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary"""
        return asdict(self)
