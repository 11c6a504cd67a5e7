"""
Todo endpoints for API v1.

Listing, creating and deleting todos.  There is no update operation;
to change a title, delete the todo and create a new one.  Handlers are
synchronous so FastAPI runs them on its threadpool; the service does
its own locking.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from hello_todo_api.app.api.deps import get_todo_service
from hello_todo_api.app.schemas.todo import TodoCreate, TodoRead
from hello_todo_api.app.services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[TodoRead])
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return every todo in insertion order."""
    return service.index()


@router.post("/todos", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_in: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Create a todo and return it with its assigned id.

    A body without a string ``title`` is rejected by request
    validation with HTTP 422.
    """
    return service.create(todo_in)


@router.delete("/todos/{todo_id}", status_code=status.HTTP_200_OK)
def delete_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo.

    Returns HTTP 200 with an empty body on success and HTTP 404 if no
    todo with the given id exists.
    """
    if not service.delete(todo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return Response(status_code=status.HTTP_200_OK)
