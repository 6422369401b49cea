"""test_category_models: 카테고리 모델 및 요청 단위 DB 세션 테스트."""

from unittest.mock import patch

import pytest

from dependencies.db_session import DbSession
from models.category_models import Category, get_all_categories, row_to_category


def test_row_to_category_with_top_candidate():
    """선두 후보자가 있는 행을 변환합니다."""
    category = row_to_category((1, "Best Actor", "Acting", 3, "Alice", 42))

    assert category == Category(
        id="1",
        name="Best Actor",
        description="Acting",
        candidate_count=3,
        top_candidate_name="Alice",
        top_candidate_votes=42,
    )


def test_row_to_category_without_candidates():
    """후보자가 없으면 선두 후보자 이름과 득표수가 모두 None입니다."""
    category = row_to_category((7, "Best Director", None, 0, None, None))

    assert category.id == "7"
    assert category.description == ""
    assert category.candidate_count == 0
    assert category.top_candidate_name is None
    assert category.top_candidate_votes is None


def test_row_to_category_keeps_votes_paired_with_name():
    """이름이 없는데 득표수만 있는 행은 득표수도 None으로 맞춥니다."""
    category = row_to_category(("c-1", "Best Score", "Music", 0, None, 5))
    assert category.top_candidate_votes is None

    category = row_to_category(("c-2", "Best Song", "Music", 1, "Bob", None))
    assert category.top_candidate_votes == 0


def test_category_to_dict_has_wire_fields():
    category = Category(id="1", name="A", description="", candidate_count=0)
    assert category.to_dict() == {
        "id": "1",
        "name": "A",
        "description": "",
        "candidate_count": 0,
        "top_candidate_name": None,
        "top_candidate_votes": None,
    }


@pytest.mark.asyncio
async def test_get_all_categories_orders_by_name(fake_connection):
    """이름 오름차순 쿼리를 실행하고 행을 Category로 변환합니다."""
    get_connection, cursor = fake_connection
    cursor.fetchall.return_value = [
        (1, "Best Actor", "Acting", 3, "Alice", 42),
        (2, "Best Director", "Directing", 0, None, None),
    ]

    with patch("dependencies.db_session.get_connection", get_connection):
        categories = await get_all_categories(DbSession())

    assert [c.name for c in categories] == ["Best Actor", "Best Director"]
    query = cursor.execute.await_args_list[-1].args[0]
    assert "FROM categories" in query
    assert query.endswith("ORDER BY name ASC")


@pytest.mark.asyncio
async def test_get_all_categories_empty(fake_connection):
    """테이블이 비어 있으면 빈 리스트를 반환합니다."""
    get_connection, _ = fake_connection

    with patch("dependencies.db_session.get_connection", get_connection):
        categories = await get_all_categories(DbSession())

    assert categories == []


@pytest.mark.asyncio
async def test_get_all_categories_propagates_query_error(fake_connection):
    """쿼리 오류는 그대로 전파됩니다."""
    get_connection, cursor = fake_connection
    cursor.fetchall.side_effect = RuntimeError("query failed")

    with patch("dependencies.db_session.get_connection", get_connection):
        with pytest.raises(RuntimeError):
            await get_all_categories(DbSession())


@pytest.mark.asyncio
async def test_session_binds_session_token(fake_connection):
    """세션 쿠키가 있으면 연결에 토큰을 바인딩합니다."""
    from core.config import settings

    get_connection, cursor = fake_connection
    session = DbSession(cookies={settings.SESSION_COOKIE_NAME: "token-123"})

    with patch("dependencies.db_session.get_connection", get_connection):
        async with session.connect():
            pass

    cursor.execute.assert_awaited_once_with("SET @session_token = %s", ("token-123",))


@pytest.mark.asyncio
async def test_session_resets_token_without_cookie(fake_connection):
    """세션 쿠키가 없으면 이전 요청의 토큰이 남지 않도록 NULL로 설정합니다."""
    get_connection, cursor = fake_connection

    with patch("dependencies.db_session.get_connection", get_connection):
        async with DbSession(cookies={"other": "x"}).connect():
            pass

    cursor.execute.assert_awaited_once_with("SET @session_token = %s", (None,))


@pytest.mark.asyncio
async def test_session_without_pool_raises():
    """연결 풀이 초기화되지 않았으면 RuntimeError가 발생합니다."""
    with pytest.raises(RuntimeError):
        async with DbSession().connect():
            pass
