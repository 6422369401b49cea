"""db_session: 요청 단위 데이터베이스 세션 의존성 모듈.

호출자의 쿠키에 묶인 DB 세션 컨텍스트를 명시적으로 생성하여
핸들러에 주입합니다.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncGenerator

import aiomysql
from fastapi import Request

from core.config import settings
from database.connection import get_connection


@dataclass(frozen=True)
class DbSession:
    """요청 단위 DB 세션 컨텍스트.

    생성 시점에는 DB에 접근하지 않습니다. 연결은 connect() 블록 안에서만
    확보되고 블록이 끝나면 풀로 반환됩니다.

    Attributes:
        cookies: 호출자의 요청 쿠키.
    """

    cookies: dict[str, str] = field(default_factory=dict)

    @property
    def session_token(self) -> str | None:
        """세션 쿠키 값을 반환합니다. 없으면 None."""
        return self.cookies.get(settings.SESSION_COOKIE_NAME) or None

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator[aiomysql.Connection, None]:
        """호출자의 세션 토큰이 바인딩된 연결을 제공합니다.

        풀에서 재사용되는 연결에 이전 요청의 토큰이 남지 않도록
        토큰이 없으면 NULL로 덮어씁니다.

        Yields:
            MySQL 연결 객체.
        """
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SET @session_token = %s", (self.session_token,))
            yield conn


def get_db_session(request: Request) -> DbSession:
    """요청 쿠키로 DbSession을 생성하는 FastAPI 의존성."""
    return DbSession(cookies=dict(request.cookies))
