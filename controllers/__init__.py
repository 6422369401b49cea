"""controllers: 요청 핸들러 패키지.

카테고리 API와 카테고리 목록 페이지 컨트롤러 모듈을 제공합니다.
"""

from . import category_controller
from . import category_page_controller

__all__ = [
    "category_controller",
    "category_page_controller",
]
