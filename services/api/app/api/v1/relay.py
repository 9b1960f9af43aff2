from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import ORJSONResponse

from app.core.config import get_settings
from app.core.logging import get_logger
from app.services.relay import relay_rewrite
from app.services.style_mapper import DEFAULT_STYLE
from app.utils.request_body import read_json_body, require_str

router = APIRouter()
logger = get_logger(__name__)


@router.post("/send-text-to-api")
async def send_text_to_api(request: Request):
    try:
        payload = await read_json_body(request)
        text = require_str(payload, "inputText")
    except HTTPException as exc:
        logger.warning("relay_request_rejected", reason=exc.detail)
        return ORJSONResponse(status_code=exc.status_code, content={"error": "Failed to process request"})

    style = payload.get("selectedStyle")
    if not isinstance(style, str):
        style = DEFAULT_STYLE

    logger.info("relay_request_received", style=style, chars=len(text))
    return ORJSONResponse(
        content={
            "secondApiData": relay_rewrite(text, style, word_swap=get_settings().relay_word_swap),
            "message": "Text rewritten successfully",
        }
    )
