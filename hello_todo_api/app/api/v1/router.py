"""
Top‑level router for version 1 of the API.

This router aggregates the route groups.  Each endpoint module
declares its own full paths (``/hello``, ``/todos``, ``/big``), so no
prefix is added here.
"""

from fastapi import APIRouter

from .endpoints import big, hello, todos

router = APIRouter()

router.include_router(hello.router, tags=["hello"])
router.include_router(todos.router, tags=["todos"])
router.include_router(big.router, tags=["big"])
