"""dependencies: FastAPI 의존성 주입 패키지.

요청 단위 DB 세션 및 요청 컨텍스트 관련 의존성 함수를 제공합니다.
"""

from .db_session import DbSession, get_db_session
from .request_context import get_request_timestamp

__all__ = [
    "DbSession",
    "get_db_session",
    "get_request_timestamp",
]
