from fastapi import status


class BaseHTTPException(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None, status_code: int | None = None):
        if detail is not None:
            self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.detail)


class ConfigurationError(BaseHTTPException):
    detail = "AI_GATEWAY_API_KEY is not configured"


class UpstreamRateLimited(BaseHTTPException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Rate limited. Please try again in a moment."


class UpstreamQuotaExceeded(BaseHTTPException):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    detail = "Usage limit reached. Please upgrade your plan."


class UpstreamError(BaseHTTPException):
    def __init__(self, upstream_status: int | None = None, detail: str | None = None):
        if detail is None:
            detail = f"AI Gateway error: {upstream_status}" if upstream_status else "AI Gateway error"
        super().__init__(detail)


class EmptyResponse(BaseHTTPException):
    detail = "No response from AI"


class InterviewNotFound(BaseHTTPException):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, interview_id: str):
        self.interview_id = interview_id
        super().__init__(f"Interview {interview_id} not found")


class InterviewStateError(BaseHTTPException):
    status_code = status.HTTP_409_CONFLICT
