import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, TypedDict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RoleType(str, Enum):
    DEVOPS = "devops"
    CLOUD = "cloud"
    SOFTWARE = "software"
    DATA = "data"
    FULLSTACK = "fullstack"
    FRONTEND = "frontend"
    BACKEND = "backend"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class InterviewStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatAction(str, Enum):
    START = "start"
    RESPOND = "respond"
    END = "end"


class ChatState(TypedDict, total=False):
    role_type: str
    difficulty: str
    job_description: str | None
    messages: List[Dict[str, str]]
    action: str
    prompt_messages: List[Dict[str, str]]
    max_tokens: int
    content: str
    feedback: Dict[str, Any] | None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Message(CamelModel):
    id: str = Field(default_factory=_new_id)
    session_id: str
    role: MessageRole
    content: str
    created_at: datetime = Field(default_factory=_utcnow)

    def as_transcript_entry(self) -> Dict[str, str]:
        return {"role": self.role.value, "content": self.content}


class InterviewSession(CamelModel):
    id: str = Field(default_factory=_new_id)
    user_id: str
    role_type: RoleType
    difficulty: Difficulty
    job_description: str | None = None
    status: InterviewStatus = InterviewStatus.IN_PROGRESS
    overall_score: int | float | None = None
    skill_ratings: Dict[str, int | float] = {}
    feedback_summary: str | None = None
    improvement_plan: List[str] = []
    started_at: datetime = Field(default_factory=_utcnow)
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == InterviewStatus.COMPLETED
