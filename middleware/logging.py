# logging: 요청/응답 로깅 미들웨어
# 모든 HTTP 요청과 응답을 "api" 로거로 남긴다.

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    메소드, 경로, 상태 코드, 처리 시간을 기록한다.
    카테고리 페이지가 내부적으로 호출하는 API 요청도 함께 기록된다.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        path = request.url.path

        logger.info(f"-> {request.method} {path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"<- {request.method} {path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        return response
