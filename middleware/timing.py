# timing: 요청 타이밍 미들웨어
# 요청 시각과 처리 시간을 기록합니다.

import time
from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class TimingMiddleware(BaseHTTPMiddleware):
    """
    요청 타이밍 미들웨어

    요청 시각(UTC)을 request.state.request_time에 저장하고,
    처리 시간을 X-Process-Time 응답 헤더로 돌려줍니다.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.request_time = datetime.now(timezone.utc)
        started = time.perf_counter()

        response = await call_next(request)

        response.headers["X-Process-Time"] = f"{time.perf_counter() - started:.3f}"
        return response
