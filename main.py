"""main: FastAPI 애플리케이션의 메인 진입점.

애플리케이션 설정, 미들웨어 구성, 라우터 등록, 전역 예외 핸들러를 설정합니다.
"""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from mangum import Mangum
from routers import category_router, category_page_router
from middleware import TimingMiddleware, LoggingMiddleware
from middleware.exception_handler import global_exception_handler
from core.config import settings
from database.connection import init_db, close_db


logger = logging.getLogger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리.

    시작 시 데이터베이스 연결 풀을 초기화하고, 종료 시 연결 풀을 정리합니다.
    """
    await init_db()
    yield
    await close_db()


app = FastAPI(
    title="Awards Categories API",
    description="시상식 투표 카테고리 API 서버",
    version="1.0.0",
    lifespan=lifespan,
)

# 각 요청에 타임스탬프를 주입하여 request.state에서 접근 가능하게 함
app.add_middleware(TimingMiddleware)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(category_router)
app.include_router(category_page_router)

if os.path.isdir("assets"):
    app.mount("/assets", StaticFiles(directory="assets"), name="assets")


@app.get("/health", status_code=200)
async def health_check():
    """서버 상태 및 DB 연결 확인."""
    from database.connection import test_connection

    if await test_connection():
        return {"status": "ok", "database": "connected"}
    return {"status": "error", "database": "disconnected"}


app.add_exception_handler(Exception, global_exception_handler)

# AWS 핸들러 설정
handler = Mangum(app)
