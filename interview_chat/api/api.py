from fastapi import APIRouter

from interview_chat.api.endpoints.chat import chat_router
from interview_chat.api.endpoints.interview import interview_router

api_router = APIRouter()

api_router.include_router(chat_router, tags=["chat"])
api_router.include_router(interview_router, prefix="/interviews", tags=["interviews"])
