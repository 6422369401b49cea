"""models: 데이터 클래스 및 데이터 조회 함수 패키지.

카테고리 데이터 모델과 MySQL 조회 함수를 제공합니다.
"""

from .category_models import (
    Category,
    row_to_category,
    get_all_categories,
)

__all__ = [
    "Category",
    "row_to_category",
    "get_all_categories",
]
