from interview_chat.system.exceptions.api_exception_handler import (
    common_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from interview_chat.system.exceptions.base_exception import (
    BaseHTTPException,
    ConfigurationError,
    EmptyResponse,
    InterviewNotFound,
    InterviewStateError,
    UpstreamError,
    UpstreamQuotaExceeded,
    UpstreamRateLimited,
)

__all__ = [
    "BaseHTTPException",
    "ConfigurationError",
    "EmptyResponse",
    "InterviewNotFound",
    "InterviewStateError",
    "UpstreamError",
    "UpstreamQuotaExceeded",
    "UpstreamRateLimited",
    "common_exception_handler",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
