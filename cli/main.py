#!/usr/bin/env python3
"""
StudyFlow CLI - Main Entry Point

Usage:
    studyflow timer                 # One 25 minute pomodoro
    studyflow timer --cycles 4      # Four pomodoros with breaks
    studyflow tasks --sort priority # Task table
    studyflow --help                # Show help
"""

import argparse
import asyncio
import logging
import sys

import httpx
from rich.console import Console

from cli.config import CLIConfig


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI"""
    parser = argparse.ArgumentParser(
        prog="studyflow",
        description="StudyFlow - pomodoro timer and study planner in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  studyflow timer --task 3                 Focus on task 3 for one pomodoro
  studyflow timer --cycles 4 --short 3     Four pomodoros with 3 minute breaks
  studyflow tasks --filter incomplete      Open tasks, earliest due first
  studyflow upcoming                       Next deadlines
  studyflow week --date 2026-10-19         Calendar week containing a day
  studyflow goals                          Goal progress

Configuration:
  ~/.studyflow/config.json, then STUDYFLOW_* environment variables
  (STUDYFLOW_API_URL, STUDYFLOW_POMODORO_MINUTES, ...). A .env file in the
  current directory is loaded first.
        """
    )

    parser.add_argument("--server-url", type=str, help="API base URL (default: http://localhost:8000/api)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Timer command
    timer_parser = subparsers.add_parser("timer", help="Run the pomodoro timer")
    timer_parser.add_argument("--task", type=int, help="Task id the session belongs to")
    timer_parser.add_argument("--pomodoro", type=int, help="Pomodoro length in minutes")
    timer_parser.add_argument("--short", type=int, help="Short break length in minutes")
    timer_parser.add_argument("--long", type=int, help="Long break length in minutes")
    timer_parser.add_argument("--interval", type=int, help="Pomodoros before a long break")
    timer_parser.add_argument("--auto-start-breaks", action="store_true", help="Start breaks automatically")
    timer_parser.add_argument("--cycles", type=int, default=1, help="Number of pomodoros to run (default: 1)")
    timer_parser.add_argument("--no-record", action="store_true", help="Do not record sessions through the API")

    # Task commands
    tasks_parser = subparsers.add_parser("tasks", help="List tasks")
    tasks_parser.add_argument("--filter", choices=["all", "completed", "incomplete"], default="all")
    tasks_parser.add_argument("--sort", choices=["dueDate", "priority", "createdAt"], default="dueDate")
    tasks_parser.add_argument("--course", type=int, help="Only tasks of this course id")
    tasks_parser.add_argument("--search", type=str, help="Match title or description")

    upcoming_parser = subparsers.add_parser("upcoming", help="Show upcoming deadlines")
    upcoming_parser.add_argument("--limit", type=int, default=5)

    week_parser = subparsers.add_parser("week", help="Show a calendar week")
    week_parser.add_argument("--date", type=str, help="Any day in the week (YYYY-MM-DD)")

    subparsers.add_parser("goals", help="Show goal progress")
    subparsers.add_parser("sessions", help="Show recorded pomodoro sessions")
    subparsers.add_parser("whoami", help="Show current user info")

    return parser


def apply_timer_args(config: CLIConfig, args: argparse.Namespace) -> CLIConfig:
    """Override timer settings with command line flags"""
    if args.pomodoro is not None:
        config.pomodoro_minutes = args.pomodoro
    if args.short is not None:
        config.short_break_minutes = args.short
    if args.long is not None:
        config.long_break_minutes = args.long
    if args.interval is not None:
        config.long_break_interval = args.interval
    if args.auto_start_breaks:
        config.auto_start_breaks = True
    if args.no_record:
        config.record_sessions = False
    return config


async def run_command(args: argparse.Namespace, config: CLIConfig, console: Console) -> None:
    from cli.api_client import StudyFlowClient
    from cli.renderer import Renderer

    renderer = Renderer(console)

    async with StudyFlowClient(config) as client:
        if args.command == "timer":
            from cli.timer_runner import TimerRunner
            runner = TimerRunner(apply_timer_args(config, args), console, client)
            await runner.run(task_id=args.task, cycles=args.cycles)

        elif args.command == "tasks":
            tasks = await client.list_tasks(args.filter, args.sort, args.course, args.search)
            renderer.render_tasks(tasks, await client.list_courses())

        elif args.command == "upcoming":
            tasks = await client.upcoming_deadlines(args.limit)
            renderer.render_tasks(tasks, await client.list_courses(), title="Upcoming deadlines")

        elif args.command == "week":
            renderer.render_week(await client.week(args.date))

        elif args.command == "goals":
            renderer.render_goals(await client.goal_summary())

        elif args.command == "sessions":
            renderer.render_sessions(await client.list_sessions())

        elif args.command == "whoami":
            renderer.render_user(await client.get_user())


def main():
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    console = Console()
    config = CLIConfig.load_default()
    if args.server_url:
        config.api_base_url = args.server_url
    if args.verbose:
        config.verbose = True

    from cli.api_client import APIError
    from cli.renderer import Renderer
    from app.core.exceptions import InvalidTimerSettingsError

    # Timer transitions log at INFO; keep them out of the live display
    logging.getLogger("studyflow").setLevel(logging.DEBUG if config.verbose else logging.WARNING)

    try:
        asyncio.run(run_command(args, config, console))

    except KeyboardInterrupt:
        console.print("\n\nGoodbye! 👋")
        sys.exit(0)
    except httpx.ConnectError:
        console.print(f"[red]Cannot connect to {config.api_base_url}. Is the backend running?[/red]")
        sys.exit(1)
    except InvalidTimerSettingsError as e:
        Renderer(console).render_error(e.message)
        sys.exit(2)
    except APIError as e:
        Renderer(console).render_error(f"Request failed ({e.status_code})", e.message)
        sys.exit(1)
    except Exception as e:
        if config.verbose:
            console.print_exception()
        else:
            console.print(f"\n❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
