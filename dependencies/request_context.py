# request_context: 요청 컨텍스트 의존성
# TimingMiddleware가 기록한 요청 시각에 대한 접근을 제공합니다.

from datetime import datetime, timezone
from fastapi import Request

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_request_timestamp(request: Request) -> str:
    """
    요청 타임스탬프를 ISO 8601 문자열로 반환

    미들웨어가 설정되지 않은 경우 현재 시간을 사용
    """
    request_time = getattr(request.state, "request_time", None)
    if request_time is None:
        request_time = datetime.now(timezone.utc)
    return request_time.strftime(TIMESTAMP_FORMAT)
