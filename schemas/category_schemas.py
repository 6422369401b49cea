"""category_schemas: 카테고리 관련 Pydantic 모델 모듈.

카테고리 API 응답 스키마를 정의합니다.
"""

from pydantic import BaseModel, Field, TypeAdapter, model_validator


class CategoryResponse(BaseModel):
    """카테고리 응답 모델.

    Attributes:
        id: 카테고리 ID (문자열).
        name: 카테고리 이름.
        description: 설명 (빈 문자열 가능).
        candidate_count: 후보자 수.
        top_candidate_name: 선두 후보자 이름 (후보자가 없으면 None).
        top_candidate_votes: 선두 후보자 득표수 (후보자가 없으면 None).
    """

    id: str
    name: str = Field(..., min_length=1)
    description: str = ""
    candidate_count: int = Field(0, ge=0)
    top_candidate_name: str | None = None
    top_candidate_votes: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_top_candidate(self) -> "CategoryResponse":
        """선두 후보자 이름과 득표수가 함께 존재하는지 검증합니다.

        Raises:
            ValueError: 둘 중 하나만 None인 경우.
        """
        if (self.top_candidate_name is None) != (self.top_candidate_votes is None):
            raise ValueError("선두 후보자 이름과 득표수는 함께 존재해야 합니다.")
        return self


class CategoryErrorResponse(BaseModel):
    """카테고리 조회 실패 응답 모델."""

    error: str


CategoryListAdapter = TypeAdapter(list[CategoryResponse])
"""카테고리 목록(JSON 배열) 검증용 어댑터."""
