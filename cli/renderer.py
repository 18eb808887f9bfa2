"""
Terminal rendering for API data

Tables and panels built with rich. Input is the camelCase JSON returned by
the REST API.
"""

from datetime import datetime
from typing import Optional, Dict, Any, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.progress_bar import ProgressBar

from app.utils.formatting import format_date, format_relative_date, is_past_date, truncate, format_clock

PRIORITY_STYLES = {
    "high": "bold red",
    "medium": "yellow",
    "low": "dim",
}


def _parse(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


class Renderer:
    """Prints API payloads as rich tables"""

    def __init__(self, console: Console):
        self.console = console

    def _course_label(self, course_id: Optional[int], courses: Dict[int, Dict[str, Any]]) -> Text:
        course = courses.get(course_id) if course_id is not None else None
        if not course:
            return Text("-", style="dim")
        return Text(course["code"], style=course["color"])

    def render_tasks(self, tasks: List[Dict[str, Any]], courses: Optional[List[Dict[str, Any]]] = None,
                     title: str = "Tasks"):
        by_id = {c["id"]: c for c in courses or []}
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", width=4)
        table.add_column("", width=2)
        table.add_column("Task", style="white")
        table.add_column("Course")
        table.add_column("Due")
        table.add_column("Priority", justify="center")

        for task in tasks:
            due = _parse(task.get("dueDate"))
            if due is None:
                due_text = Text("No due date", style="dim")
            else:
                overdue = not task["completed"] and is_past_date(due)
                due_text = Text(format_relative_date(due), style="red" if overdue else "")

            status_icon = "[green]✓[/green]" if task["completed"] else "[dim]○[/dim]"
            table.add_row(
                str(task["id"]),
                status_icon,
                truncate(task["title"], 60),
                self._course_label(task.get("courseId"), by_id),
                due_text,
                Text(task["priority"], style=PRIORITY_STYLES.get(task["priority"], "")),
            )

        if not tasks:
            self.console.print(f"[dim]No {title.lower()} to show[/dim]")
            return
        self.console.print(table)

    def render_week(self, days: List[Dict[str, Any]]):
        table = Table(title="This week", show_header=True, header_style="bold cyan")
        table.add_column("Day")
        table.add_column("Date")
        table.add_column("Tasks")

        for day in days:
            day_date = datetime.fromisoformat(day["day"])
            label = f"{day_date:%a}" + (" (today)" if day["isToday"] else "")
            names = ", ".join(truncate(t["title"], 30) for t in day["tasks"]) or "-"
            table.add_row(
                Text(label, style="bold magenta" if day["isToday"] else ""),
                format_date(day_date),
                names,
            )
        self.console.print(table)

    def render_goals(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold]{summary['overallProgress']}%[/bold] overall progress",
            title="[cyan]Goals[/cyan]",
            border_style="cyan"
        ))
        goals = ([summary["mainGoal"]] if summary.get("mainGoal") else []) + summary["otherGoals"]
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Goal")
        table.add_column("Progress", width=30)
        table.add_column("%", justify="right")
        for goal in goals:
            table.add_row(
                Text(goal["title"], style=goal.get("color") or ""),
                ProgressBar(total=100, completed=goal["progress"], width=28, complete_style=goal.get("color") or "cyan"),
                str(goal["progress"]),
            )
        self.console.print(table)

    def render_sessions(self, sessions: List[Dict[str, Any]]):
        table = Table(title="Pomodoro sessions", show_header=True, header_style="bold cyan")
        table.add_column("#", style="dim", width=4)
        table.add_column("Started")
        table.add_column("Minutes", justify="right")
        table.add_column("Task", justify="right")

        for session in sessions:
            started = _parse(session["startTime"])
            table.add_row(
                str(session["id"]),
                f"{format_date(started)} {started:%H:%M}",
                str(session["duration"]),
                str(session["taskId"]) if session.get("taskId") is not None else "-",
            )
        total = sum(s["duration"] for s in sessions)
        self.console.print(table)
        self.console.print(f"[dim]{len(sessions)} sessions, {total} focused minutes[/dim]")

    def render_user(self, user: Dict[str, Any]):
        lines = [
            f"[bold]{user['firstName']} {user['lastName']}[/bold] ({user['username']})",
        ]
        if user.get("university"):
            lines.append(user["university"])
        self.console.print(Panel("\n".join(lines), title="[cyan]Signed in as[/cyan]", border_style="cyan"))

    def render_timer(self, snapshot: Dict[str, Any], cycle: int, cycles: int) -> Panel:
        """Panel shown inside the live countdown"""
        mode_titles = {
            "pomodoro": ("Focus", "red"),
            "shortBreak": ("Short break", "green"),
            "longBreak": ("Long break", "blue"),
        }
        title, color = mode_titles.get(snapshot["mode"], (snapshot["mode"], "white"))
        state = "running" if snapshot["is_running"] else snapshot["status"]
        body = Text.assemble(
            (format_clock(snapshot["remaining_seconds"]), f"bold {color}"),
            "\n",
            (f"{state} · completed {snapshot['completed_pomodoros']} · interval {cycle}/{cycles}", "dim"),
        )
        return Panel(body, title=f"[bold]{title}[/bold]", border_style=color, width=44)

    def render_error(self, message: str, details: Optional[str] = None):
        """Render an error message"""
        error_panel = Panel(
            f"[bold red]{message}[/bold red]" +
            (f"\n\n[dim]{details}[/dim]" if details else ""),
            title="[red]Error[/red]",
            border_style="red"
        )
        self.console.print(error_panel)
