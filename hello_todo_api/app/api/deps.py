"""
FastAPI dependencies that hand out the per‑application services.

``create_app`` builds one ``TodoService`` and one
``RandomByteGenerator`` and stores them on ``app.state``; endpoints
declare ``Depends(get_todo_service)`` or ``Depends(get_byte_generator)``
instead of importing module level singletons.
"""

from fastapi import Request

from hello_todo_api.app.core.config import Settings
from hello_todo_api.app.core.random_bytes import ByteGenerator
from hello_todo_api.app.services.todo_service import TodoService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_todo_service(request: Request) -> TodoService:
    return request.app.state.todo_service


def get_byte_generator(request: Request) -> ByteGenerator:
    return request.app.state.byte_generator
