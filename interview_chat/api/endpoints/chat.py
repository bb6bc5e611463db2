import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from interview_chat.api.deps import get_engine
from interview_chat.api.schemas import InterviewChatRequest
from interview_chat.config.settings import settings
from interview_chat.core.engine import InterviewChatEngine

logger = logging.getLogger(__name__)
chat_router = APIRouter()

CHAT_PATH = "/interview-chat"


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(settings.CORS_ALLOW_HEADERS),
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }


@chat_router.options(CHAT_PATH)
async def interview_chat_options() -> Response:
    return Response(status_code=200, headers=cors_headers())


@chat_router.post(CHAT_PATH)
async def interview_chat(
    payload: InterviewChatRequest,
    engine: InterviewChatEngine = Depends(get_engine),
) -> Dict[str, Any]:
    logger.info(
        f"Interview chat '{payload.action.value}' for interview {payload.interview_id or '-'} "
        f"({payload.role_type or '?'}/{payload.difficulty or '?'}, {len(payload.messages)} messages)"
    )
    return await engine.run(
        payload.action,
        role_type=payload.role_type,
        difficulty=payload.difficulty,
        messages=[m.model_dump() for m in payload.messages],
        job_description=payload.job_description,
    )
