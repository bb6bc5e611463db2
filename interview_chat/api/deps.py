from interview_chat.core.engine import InterviewChatEngine
from interview_chat.core.gateway import AIGatewayClient
from interview_chat.core.use_case import InterviewUseCase
from interview_chat.storages.session_storage import SessionStorage

_gateway: AIGatewayClient | None = None
_engine: InterviewChatEngine | None = None
_storage: SessionStorage | None = None
_use_case: InterviewUseCase | None = None


def get_gateway() -> AIGatewayClient:
    global _gateway
    if _gateway is None:
        _gateway = AIGatewayClient()
    return _gateway


def get_engine() -> InterviewChatEngine:
    global _engine
    if _engine is None:
        _engine = InterviewChatEngine(get_gateway())
    return _engine


def get_storage() -> SessionStorage:
    global _storage
    if _storage is None:
        _storage = SessionStorage()
    return _storage


def get_use_case() -> InterviewUseCase:
    global _use_case
    if _use_case is None:
        _use_case = InterviewUseCase(get_engine(), get_storage())
    return _use_case


async def close_gateway() -> None:
    global _gateway, _engine, _use_case
    if _gateway is not None:
        await _gateway.aclose()
    _gateway = None
    _engine = None
    _use_case = None
