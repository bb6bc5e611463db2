import json
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from interview_chat.api.deps import get_use_case
from interview_chat.api.schemas import (
    InterviewCreateRequest,
    InterviewDetailResponse,
    InterviewMessageRequest,
)
from interview_chat.core.feedback import Feedback
from interview_chat.core.models import InterviewSession, Message
from interview_chat.core.use_case import InterviewUseCase

logger = logging.getLogger(__name__)
interview_router = APIRouter()


@interview_router.post("", response_model=InterviewSession, status_code=status.HTTP_201_CREATED)
async def create_interview(
    payload: InterviewCreateRequest,
    use_case: InterviewUseCase = Depends(get_use_case),
):
    return use_case.create_interview(
        payload.user_id,
        payload.role_type,
        payload.difficulty,
        payload.job_description,
    )


@interview_router.get("", response_model=List[InterviewSession])
async def list_interviews(
    user_id: str = Query(..., alias="userId", description="Owner of the interviews"),
    use_case: InterviewUseCase = Depends(get_use_case),
):
    return use_case.list_interviews(user_id)


@interview_router.get("/{interview_id}", response_model=InterviewDetailResponse)
async def get_interview(interview_id: str, use_case: InterviewUseCase = Depends(get_use_case)):
    interview = use_case.get_interview(interview_id)
    return InterviewDetailResponse(interview=interview, messages=use_case.get_messages(interview_id))


@interview_router.post("/{interview_id}/start", response_model=InterviewDetailResponse)
async def start_interview(interview_id: str, use_case: InterviewUseCase = Depends(get_use_case)):
    logger.info(f"Starting interview {interview_id}")
    interview, messages = await use_case.start_interview(interview_id)
    return InterviewDetailResponse(interview=interview, messages=messages)


@interview_router.post("/{interview_id}/messages", response_model=Message)
async def send_message(
    interview_id: str,
    payload: InterviewMessageRequest,
    use_case: InterviewUseCase = Depends(get_use_case),
):
    logger.info(f"Processing message for interview {interview_id}")
    return await use_case.send_message(interview_id, payload.content)


@interview_router.post("/{interview_id}/end", response_model=InterviewSession)
async def end_interview(interview_id: str, use_case: InterviewUseCase = Depends(get_use_case)):
    logger.info(f"Ending interview {interview_id}")
    return await use_case.end_interview(interview_id)


@interview_router.get("/{interview_id}/report", response_model=Feedback)
async def get_report(interview_id: str, use_case: InterviewUseCase = Depends(get_use_case)):
    return use_case.get_report(interview_id)


@interview_router.get("/{interview_id}/transcript")
async def download_transcript(interview_id: str, use_case: InterviewUseCase = Depends(get_use_case)):
    interview = use_case.get_interview(interview_id)
    messages = use_case.get_messages(interview_id)

    transcript = {
        "interview": interview.model_dump(mode="json", by_alias=True),
        "messages": [m.model_dump(mode="json", by_alias=True) for m in messages],
    }
    json_content = json.dumps(transcript, ensure_ascii=False, indent=2)

    return Response(
        content=json_content,
        headers={
            "Content-Disposition": f'attachment; filename="interview_{interview_id}.json"',
        },
        media_type="application/json"
    )
