"""category_router: 카테고리 API 라우터 모듈."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from controllers import category_controller
from dependencies.db_session import DbSession, get_db_session
from schemas.category_schemas import CategoryErrorResponse, CategoryResponse

category_router = APIRouter(prefix="/api/categories", tags=["categories"])
"""카테고리 API 라우터 인스턴스."""


@category_router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[CategoryResponse],
    responses={500: {"model": CategoryErrorResponse}},
)
async def get_categories(
    session: DbSession = Depends(get_db_session),
) -> JSONResponse:
    """카테고리 목록을 이름순으로 조회합니다. 인증 불필요."""
    return await category_controller.get_categories(session)
