"""category_controller: 카테고리 관련 컨트롤러 모듈."""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from dependencies.db_session import DbSession
from models import category_models

logger = logging.getLogger("api")

FETCH_FAILED_MESSAGE = "Failed to fetch categories"


async def get_categories(session: DbSession) -> JSONResponse:
    """카테고리 목록을 이름순으로 조회합니다.

    조회에 실패하면 부분 결과 없이 고정된 메시지의 500 응답을 반환합니다.

    Args:
        session: 요청 단위 DB 세션.

    Returns:
        카테고리 배열(200) 또는 에러 객체(500)를 담은 JSONResponse.
    """
    try:
        categories = await category_models.get_all_categories(session)
    except Exception:
        logger.exception("카테고리 목록 조회 실패")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FETCH_FAILED_MESSAGE},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[category.to_dict() for category in categories],
    )
