"""Static greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hello, world!"


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    """Return the fixed greeting as plain text."""
    return GREETING
