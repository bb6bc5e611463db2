import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from interview_chat.core.engine import InterviewChatEngine
from interview_chat.core.feedback import Feedback
from interview_chat.core.models import (
    ChatAction,
    Difficulty,
    InterviewSession,
    InterviewStatus,
    Message,
    MessageRole,
    RoleType,
)
from interview_chat.storages.session_storage import SessionStorage
from interview_chat.system.exceptions import InterviewNotFound, InterviewStateError

MIN_MESSAGES_TO_END = 4


class InterviewUseCase:
    def __init__(self, engine: InterviewChatEngine, storage: SessionStorage):
        self.engine = engine
        self.storage = storage
        self._locks: Dict[str, asyncio.Lock] = {}

    def create_interview(
        self,
        user_id: str,
        role_type: RoleType,
        difficulty: Difficulty,
        job_description: str | None = None,
    ) -> InterviewSession:
        session = InterviewSession(
            user_id=user_id,
            role_type=role_type,
            difficulty=difficulty,
            job_description=job_description or None,
        )
        self.storage.save(session)
        self.engine.logger.log("Session", f"Interview {session.id} created", {
            "user_id": user_id,
            "role_type": session.role_type.value,
            "difficulty": session.difficulty.value,
        })
        return session

    async def start_interview(self, session_id: str) -> Tuple[InterviewSession, List[Message]]:
        async with self._lock(session_id):
            session = self._get_in_progress(session_id)
            messages = self.storage.get_messages(session_id)
            if messages:
                self.engine.logger.log("Session", f"Resuming interview {session_id}")
                return session, messages

            result = await self.engine.run(ChatAction.START, **self._engine_context(session))
            self.storage.add_message(session_id, MessageRole.ASSISTANT, result["message"])
            return session, self.storage.get_messages(session_id)

    async def send_message(self, session_id: str, content: str) -> Message:
        async with self._lock(session_id):
            session = self._get_in_progress(session_id)
            if not self.storage.get_messages(session_id):
                raise InterviewStateError("Interview has not been started yet")

            user_message = self.storage.add_message(session_id, MessageRole.USER, content)
            transcript = [m.as_transcript_entry() for m in self.storage.get_messages(session_id)]
            try:
                result = await self.engine.run(ChatAction.RESPOND, messages=transcript, **self._engine_context(session))
            except Exception:
                self.storage.remove_message(session_id, user_message.id)
                raise

            return self.storage.add_message(session_id, MessageRole.ASSISTANT, result["message"])

    async def end_interview(self, session_id: str) -> InterviewSession:
        async with self._lock(session_id):
            session = self._get_in_progress(session_id)
            messages = self.storage.get_messages(session_id)
            if len(messages) < MIN_MESSAGES_TO_END:
                raise InterviewStateError(
                    f"Interview needs at least {MIN_MESSAGES_TO_END} messages before it can be ended"
                )

            transcript = [m.as_transcript_entry() for m in messages]
            result = await self.engine.run(ChatAction.END, messages=transcript, **self._engine_context(session))
            feedback = Feedback.model_validate(result)

            completed = session.model_copy(update={
                "status": InterviewStatus.COMPLETED,
                "completed_at": datetime.now(timezone.utc),
                "overall_score": feedback.overall_score,
                "skill_ratings": feedback.skill_ratings,
                "feedback_summary": feedback.summary,
                "improvement_plan": feedback.improvement_plan,
            })
            self.storage.save(completed)
            self._locks.pop(session_id, None)
            self.engine.logger.log("Session", f"Interview {session_id} completed. Score: {feedback.overall_score}")
            return completed

    def get_interview(self, session_id: str) -> InterviewSession:
        session = self.storage.get(session_id)
        if session is None:
            raise InterviewNotFound(session_id)
        return session

    def get_messages(self, session_id: str) -> List[Message]:
        self.get_interview(session_id)
        return self.storage.get_messages(session_id)

    def list_interviews(self, user_id: str) -> List[InterviewSession]:
        return self.storage.list_for_user(user_id)

    def get_report(self, session_id: str) -> Feedback:
        session = self.get_interview(session_id)
        if not session.is_completed:
            raise InterviewStateError("Interview is still in progress")
        return Feedback(
            overall_score=session.overall_score,
            skill_ratings=session.skill_ratings,
            summary=session.feedback_summary or "",
            improvement_plan=session.improvement_plan,
        )

    def _get_in_progress(self, session_id: str) -> InterviewSession:
        session = self.get_interview(session_id)
        if session.is_completed:
            raise InterviewStateError("Interview is already completed")
        return session

    def _lock(self, session_id: str) -> asyncio.Lock:
        if session_id not in self._locks:
            self._locks[session_id] = asyncio.Lock()
        return self._locks[session_id]

    @staticmethod
    def _engine_context(session: InterviewSession) -> Dict[str, str | None]:
        return {
            "role_type": session.role_type.value,
            "difficulty": session.difficulty.value,
            "job_description": session.job_description,
        }
