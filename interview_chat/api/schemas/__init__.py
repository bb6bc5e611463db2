from interview_chat.api.schemas.interview import (
    ChatMessage,
    HealthResponse,
    InterviewChatRequest,
    InterviewCreateRequest,
    InterviewDetailResponse,
    InterviewMessageRequest,
)

__all__ = [
    "ChatMessage",
    "HealthResponse",
    "InterviewChatRequest",
    "InterviewCreateRequest",
    "InterviewDetailResponse",
    "InterviewMessageRequest",
]
