import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# 테스트에서는 실제 MySQL에 연결하지 않으므로 더미 접속 정보를 설정
os.environ.setdefault("DB_HOST", "127.0.0.1")
os.environ.setdefault("DB_PORT", "3306")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_NAME", "awards_test")

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from faker import Faker

from main import app
from models.category_models import Category


@pytest_asyncio.fixture
async def client():
    """API 테스트를 위한 Async Client. lifespan(DB 풀 초기화)은 실행되지 않음."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake():
    return Faker("en_US")


@pytest.fixture
def make_category(fake):
    """Category 생성 헬퍼. 지정하지 않은 필드는 Faker로 채움."""

    def _make(**overrides) -> Category:
        values = {
            "id": str(fake.unique.random_int(1, 100000)),
            "name": fake.unique.catch_phrase(),
            "description": fake.sentence(),
            "candidate_count": 0,
            "top_candidate_name": None,
            "top_candidate_votes": None,
        }
        values.update(overrides)
        return Category(**values)

    return _make


@pytest.fixture
def fake_connection():
    """categories 조회 결과를 돌려주는 가짜 aiomysql 연결.

    반환값: (get_connection 대체 함수, 커서 목).
    커서의 fetchall 반환값은 테스트에서 지정합니다.
    """
    cursor = MagicMock()
    cursor.execute = AsyncMock()
    cursor.fetchall = AsyncMock(return_value=[])

    conn = MagicMock()
    conn.cursor.return_value.__aenter__ = AsyncMock(return_value=cursor)
    conn.cursor.return_value.__aexit__ = AsyncMock(return_value=False)

    @asynccontextmanager
    async def _get_connection():
        yield conn

    return _get_connection, cursor
