"""
Large random payload endpoint.

``GET /big`` returns ``settings.big_payload_bytes`` random bytes
(one million by default) hex encoded as a plain text body.  The
handler is synchronous because generation is CPU bound and would
otherwise block the event loop.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from hello_todo_api.app.api.deps import get_byte_generator, get_settings
from hello_todo_api.app.core.config import Settings
from hello_todo_api.app.core.random_bytes import ByteGenerator, hex_encode

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/big", response_class=PlainTextResponse)
def big(
    generator: ByteGenerator = Depends(get_byte_generator),
    app_settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    """Return a block of random data as lowercase hexadecimal text."""
    data = generator.generate(app_settings.big_payload_bytes)
    logger.debug("Generated %d random bytes", len(data))
    return PlainTextResponse(hex_encode(data))
