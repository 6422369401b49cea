"""category_page_router: 카테고리 목록 페이지 라우터 모듈.

카테고리 목록 HTML 페이지 엔드포인트를 제공합니다.
"""

from typing import AsyncGenerator

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse

from controllers import category_page_controller
from utils.category_api_client import CategoryApiClient


category_page_router = APIRouter(prefix="/categories", tags=["pages"])
"""카테고리 목록 페이지 라우터 인스턴스."""


async def get_category_api_client(
    request: Request,
) -> AsyncGenerator[CategoryApiClient, None]:
    """요청마다 카테고리 API 클라이언트를 생성하고 끝나면 닫습니다."""
    async with CategoryApiClient.from_request(request) as client:
        yield client


@category_page_router.get("", status_code=status.HTTP_200_OK, response_class=HTMLResponse)
async def get_categories_page(
    request: Request,
    search: str = Query("", description="카테고리 이름/설명 검색어"),
    client: CategoryApiClient = Depends(get_category_api_client),
) -> HTMLResponse:
    """카테고리 목록 페이지를 HTML 형식으로 반환합니다.

    Args:
        request: FastAPI Request 객체.
        search: 검색어 (대소문자 구분 없음).
        client: 카테고리 API 클라이언트.

    Returns:
        카테고리 목록 HTML 페이지를 담은 HTMLResponse.
    """
    return await category_page_controller.get_categories_page(request, client, search)
