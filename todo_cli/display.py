"""Display formatting for todo output."""

from collections.abc import Sequence


def format_task_list(tasks: Sequence[str]) -> str:
    """Format tasks as a numbered list under a header."""
    lines = ["Todo List:"]
    if not tasks:
        lines.append("  (No tasks found)")
    else:
        lines.extend(f"{number}. {task}" for number, task in enumerate(tasks, start=1))
    return "\n".join(lines)


def format_added(task: str) -> str:
    """Confirmation line for an added task."""
    return f'Task "{task}" added!'


def format_removed(task: str) -> str:
    """Confirmation line for a removed task."""
    return f'Removed task: "{task}"'
