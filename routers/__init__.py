"""routers: FastAPI 라우터 패키지.

카테고리 API와 카테고리 목록 페이지 라우터 모듈을 제공합니다.
"""

from .category_router import category_router
from .category_page_router import category_page_router

__all__ = [
    "category_router",
    "category_page_router",
]
