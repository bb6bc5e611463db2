from typing import Dict, List

from interview_chat.core.models import InterviewSession, Message, MessageRole


class SessionStorage:
    def __init__(self):
        self._sessions: Dict[str, InterviewSession] = {}
        self._messages: Dict[str, List[Message]] = {}

    def save(self, session: InterviewSession) -> None:
        self._sessions[session.id] = session
        self._messages.setdefault(session.id, [])

    def get(self, session_id: str) -> InterviewSession | None:
        return self._sessions.get(session_id)

    def list_for_user(self, user_id: str) -> List[InterviewSession]:
        sessions = [s for s in self._sessions.values() if s.user_id == user_id]
        return sorted(sessions, key=lambda s: s.started_at, reverse=True)

    def add_message(self, session_id: str, role: MessageRole, content: str) -> Message:
        if session_id not in self._sessions:
            raise KeyError(session_id)
        message = Message(session_id=session_id, role=role, content=content)
        self._messages[session_id].append(message)
        return message

    def get_messages(self, session_id: str) -> List[Message]:
        return list(self._messages.get(session_id, []))

    def remove_message(self, session_id: str, message_id: str) -> None:
        messages = self._messages.get(session_id, [])
        self._messages[session_id] = [m for m in messages if m.id != message_id]
