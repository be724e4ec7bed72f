"""Rich terminal rendering for CLI command results."""

from typing import Any

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

from modules.guardian.models import NotificationType
from modules.health.models import PainRecordType

console = Console()

NOTIFICATION_STYLES = {
    NotificationType.URGENT: "bold red",
    NotificationType.WARNING: "yellow",
    NotificationType.INFO: "cyan",
}

RECORD_TYPE_LABELS = {
    PainRecordType.MANUAL: "manual",
    PainRecordType.POST_EXERCISE: "after exercise",
}


def mask_token(token: str) -> str:
    """Shorten a token for display.

    Example: "eyJhbGciOi...xyz" -> "eyJhbGci…xyz"
    """
    if len(token) <= 16:
        return "*" * len(token)
    return f"{token[:8]}…{token[-4:]}"


def print_data(title: str, data: Any) -> None:
    """Print an arbitrary response payload as pretty JSON in a panel."""
    console.print(Panel(JSON.from_data(data, default=str), title=title, border_style="blue"))


def print_notifications(data: dict[str, Any]) -> None:
    """Print guardian notifications as a table, unread first.

    Unknown notification types are shown unstyled.
    """
    notifications = data.get("notifications") or []
    if not notifications:
        console.print("[dim]No notifications[/dim]")
        return

    table = Table(title="Notifications")
    table.add_column("ID", style="dim")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Message")
    table.add_column("Created")
    table.add_column("Read")

    for item in sorted(notifications, key=lambda n: bool(n.get("isRead"))):
        raw_type = item.get("type", "")
        try:
            style = NOTIFICATION_STYLES[NotificationType(raw_type)]
        except ValueError:
            style = ""
        table.add_row(
            str(item.get("alertId", "")),
            f"[{style}]{raw_type}[/{style}]" if style else str(raw_type),
            str(item.get("title", "")),
            str(item.get("message", "")),
            str(item.get("createdAt", "")),
            "yes" if item.get("isRead") else "[bold]no[/bold]",
        )
    console.print(table)


def print_pain_history(data: dict[str, Any]) -> None:
    """Print pain history records as a table."""
    records = data.get("painRecords") or []
    if not records:
        console.print("[dim]No pain records[/dim]")
        return

    table = Table(title="Pain history")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Type")
    table.add_column("Total", justify="right")
    table.add_column("Notes")

    for record in records:
        raw_type = record.get("recordType", "")
        try:
            label = RECORD_TYPE_LABELS[PainRecordType(raw_type)]
        except ValueError:
            label = str(raw_type)
        table.add_row(
            str(record.get("recordDate", "")),
            str(record.get("recordTime", "")),
            label,
            str(record.get("totalPainScore", "")),
            str(record.get("notes") or ""),
        )
    console.print(table)


def print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
