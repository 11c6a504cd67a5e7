"""
Service layer for todo items.

Todos live in process memory only and are lost on restart.  The
collection preserves insertion order and hands out integer ids from a
counter that starts at 1 and is never rewound, so ids stay unique for
the lifetime of the service even after deletions.

FastAPI runs synchronous handlers on a threadpool, so every operation
takes the service lock.
"""

from __future__ import annotations

import logging
import threading
from itertools import count
from typing import Dict, List, Optional

from hello_todo_api.app.schemas.todo import TodoCreate, TodoRead


logger = logging.getLogger(__name__)


class TodoService:
    """In‑memory todo collection."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Dict[int, TodoRead] = {}
        self._next_id = count(1)

    def index(self) -> List[TodoRead]:
        """Return all todos in the order they were created."""
        with self._lock:
            return list(self._items.values())

    def get(self, todo_id: int) -> Optional[TodoRead]:
        """Return a single todo or ``None`` if it does not exist."""
        with self._lock:
            return self._items.get(todo_id)

    def create(self, data: TodoCreate) -> TodoRead:
        """Store a new todo and return it with its assigned id."""
        with self._lock:
            todo = TodoRead(id=next(self._next_id), title=data.title)
            self._items[todo.id] = todo
        logger.info("Created todo %s", todo.id)
        return todo

    def delete(self, todo_id: int) -> bool:
        """Delete a todo by id.

        Returns ``True`` if a todo was removed, ``False`` if no todo
        with that id exists.  The collection is left untouched in the
        latter case.
        """
        with self._lock:
            removed = self._items.pop(todo_id, None)
        if removed is None:
            logger.debug("Todo %s not found for deletion", todo_id)
            return False
        logger.info("Deleted todo %s", todo_id)
        return True

    def clear(self) -> None:
        """Remove every todo.  The id counter keeps counting."""
        with self._lock:
            self._items.clear()
