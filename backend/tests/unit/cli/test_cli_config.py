"""
Unit Tests for CLI configuration and argument handling
"""
import json
import pytest

from cli.config import CLIConfig
from cli.main import create_parser, apply_timer_args
from cli.timer_runner import intervals_for
from app.modules.pomodoro import PomodoroSettings

ENV_VARS = [
    "STUDYFLOW_API_URL",
    "STUDYFLOW_TIMEOUT",
    "STUDYFLOW_POMODORO_MINUTES",
    "STUDYFLOW_SHORT_BREAK_MINUTES",
    "STUDYFLOW_LONG_BREAK_MINUTES",
    "STUDYFLOW_LONG_BREAK_INTERVAL",
    "STUDYFLOW_AUTO_START_BREAKS",
    "STUDYFLOW_AUTO_START_POMODOROS",
    "STUDYFLOW_RECORD_SESSIONS",
    "STUDYFLOW_SOUNDS",
    "STUDYFLOW_VERBOSE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestCLIConfig:
    """Test CLIConfig loading"""

    def test_defaults_match_timer_defaults(self):
        config = CLIConfig()

        settings = PomodoroSettings(**config.timer_settings())

        assert settings.pomodoro_minutes == 25
        assert settings.short_break_minutes == 5
        assert settings.long_break_minutes == 15
        assert settings.long_break_interval == 4
        assert config.api_base_url == "http://localhost:8000/api"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STUDYFLOW_API_URL", "http://studyflow.local/api")
        monkeypatch.setenv("STUDYFLOW_POMODORO_MINUTES", "50")
        monkeypatch.setenv("STUDYFLOW_TIMEOUT", "2.5")
        monkeypatch.setenv("STUDYFLOW_AUTO_START_BREAKS", "yes")
        monkeypatch.setenv("STUDYFLOW_SOUNDS", "false")

        config = CLIConfig()
        config._load_from_env()

        assert config.api_base_url == "http://studyflow.local/api"
        assert config.pomodoro_minutes == 50
        assert config.timeout == 2.5
        assert config.auto_start_breaks is True
        assert config.sounds is False

    def test_file_round_trip(self, tmp_path):
        path = tmp_path / "config.json"
        config = CLIConfig(config_dir=str(tmp_path), short_break_minutes=3)
        config.save_to_file()

        assert json.loads(path.read_text())["short_break_minutes"] == 3

        loaded = CLIConfig()
        loaded.load_from_file(str(path))
        assert loaded.short_break_minutes == 3

    def test_unknown_file_keys_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "dark", "long_break_interval": 2}))

        config = CLIConfig()
        config.load_from_file(str(path))

        assert config.long_break_interval == 2
        assert not hasattr(config, "theme")

    def test_missing_file_keeps_defaults(self, tmp_path):
        config = CLIConfig()
        config.load_from_file(str(tmp_path / "missing.json"))

        assert config.pomodoro_minutes == 25


class TestArguments:
    """Test the argument parser"""

    def test_timer_flags(self):
        args = create_parser().parse_args([
            "timer", "--task", "3", "--pomodoro", "50", "--short", "10",
            "--interval", "2", "--auto-start-breaks", "--cycles", "4", "--no-record"
        ])
        config = apply_timer_args(CLIConfig(), args)

        assert args.task == 3
        assert args.cycles == 4
        assert config.pomodoro_minutes == 50
        assert config.short_break_minutes == 10
        assert config.long_break_minutes == 15
        assert config.long_break_interval == 2
        assert config.auto_start_breaks is True
        assert config.record_sessions is False

    def test_timer_without_flags_keeps_config(self):
        args = create_parser().parse_args(["timer"])
        config = apply_timer_args(CLIConfig(pomodoro_minutes=30), args)

        assert config.pomodoro_minutes == 30
        assert config.record_sessions is True
        assert args.cycles == 1

    def test_tasks_flags(self):
        args = create_parser().parse_args(["tasks", "--filter", "incomplete", "--sort", "priority", "--course", "2"])

        assert args.filter == "incomplete"
        assert args.sort == "priority"
        assert args.course == 2

    def test_invalid_filter_rejected(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["tasks", "--filter", "archived"])


class TestIntervals:

    @pytest.mark.parametrize("cycles,auto_breaks,expected", [
        (1, False, 1),
        (1, True, 2),
        (4, False, 7),
        (4, True, 8),
    ])
    def test_intervals_for(self, cycles, auto_breaks, expected):
        assert intervals_for(cycles, auto_breaks) == expected
