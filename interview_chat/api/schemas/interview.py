from typing import Any, Dict, List, Literal

from pydantic import Field, field_validator

from interview_chat.core.models import CamelModel, ChatAction, Difficulty, InterviewSession, Message, RoleType


class ChatMessage(CamelModel):
    role: Literal["user", "assistant", "system"]
    content: str


class InterviewChatRequest(CamelModel):
    interview_id: str | None = None
    role_type: str = ""
    difficulty: str = ""
    job_description: str | None = None
    messages: List[ChatMessage] = []
    action: ChatAction


class InterviewCreateRequest(CamelModel):
    user_id: str = Field(min_length=1)
    role_type: RoleType
    difficulty: Difficulty
    job_description: str | None = None


class InterviewMessageRequest(CamelModel):
    content: str

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v


class InterviewDetailResponse(CamelModel):
    interview: InterviewSession
    messages: List[Message]


class HealthResponse(CamelModel):
    status: str
    version: str
    model: str
    metrics: Dict[str, Any] = {}
