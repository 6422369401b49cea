"""category_page_controller: 카테고리 목록 페이지 컨트롤러 모듈.

카테고리 목록을 불러와 검색어로 걸러낸 뒤 HTML 페이지로 렌더링합니다.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from services.category_listing import CategoryFetcher, CategoryListState


# 프로젝트 루트 디렉터리 경로
PROJECT_ROOT = Path(__file__).parent.parent
"""프로젝트 루트 디렉터리의 경로."""

templates = Jinja2Templates(directory=str(PROJECT_ROOT / "templates"))
"""페이지 템플릿 렌더러."""


def render_categories_page(request: Request, state: CategoryListState) -> HTMLResponse:
    """현재 화면 상태를 HTML로 렌더링합니다.

    load() 이전(IDLE/LOADING) 상태를 넘기면 자리표시 카드만 그립니다.
    get_categories_page는 항상 load()가 끝난 뒤 호출합니다.
    """
    return templates.TemplateResponse(
        request, "categories.html", state.to_context()
    )


async def get_categories_page(
    request: Request, fetcher: CategoryFetcher, search: str = ""
) -> HTMLResponse:
    """카테고리 목록 페이지를 반환합니다.

    목록 조회에 실패해도 에러를 표시하지 않고 빈 목록으로 렌더링합니다.

    Args:
        request: FastAPI Request 객체.
        fetcher: 카테고리 API 클라이언트.
        search: 검색어.

    Returns:
        카테고리 목록 HTML 페이지.
    """
    state = CategoryListState()
    state.set_search_term(search)
    await state.load(fetcher)
    return render_categories_page(request, state)
