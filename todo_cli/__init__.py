"""todo-cli - a command-line todo list backed by a local JSON file."""

__version__ = "1.0.0"

from todo_cli.models import TodoDocument
from todo_cli.service import TodoService
from todo_cli.store import TaskStore

__all__ = ["TaskStore", "TodoDocument", "TodoService", "__version__"]
