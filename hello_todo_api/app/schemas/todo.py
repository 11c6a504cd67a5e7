"""
Pydantic schemas for todo items.

A todo is nothing more than an identifier and a title.  Identifiers
are assigned by the service when an item is created; clients only
ever send a title.
"""

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a new todo.

    Unknown fields, including a client supplied ``id``, are ignored.
    """

    title: str = Field(..., description="Text of the todo item")


class TodoRead(BaseModel):
    """Schema for reading a todo."""

    id: int
    title: str

    model_config = {
        "from_attributes": True,
    }
