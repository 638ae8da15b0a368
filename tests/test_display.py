"""Tests for output formatting."""

from todo_cli.display import format_added, format_removed, format_task_list


class TestFormatTaskList:
    """Tests for format_task_list."""

    def test_empty(self):
        assert format_task_list([]) == "Todo List:\n  (No tasks found)"

    def test_numbered_from_one(self):
        assert format_task_list(["buy milk", "write report"]) == (
            "Todo List:\n1. buy milk\n2. write report"
        )

    def test_empty_task_text(self):
        assert format_task_list([""]) == "Todo List:\n1. "


def test_format_added():
    assert format_added("buy milk") == 'Task "buy milk" added!'


def test_format_removed():
    assert format_removed("buy milk") == 'Removed task: "buy milk"'
