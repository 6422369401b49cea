"""category_models: 카테고리 관련 데이터 모델 및 함수 모듈.

후보자 수와 선두 후보자 정보는 상위 뷰(categories)에서 미리 집계되어
있으며, 이 모듈은 읽기만 합니다.
"""

from dataclasses import asdict, dataclass
from typing import Any

from dependencies.db_session import DbSession


@dataclass(frozen=True)
class Category:
    """카테고리 데이터 클래스.

    top_candidate_votes는 top_candidate_name이 None일 때만 None입니다.
    """

    id: str
    name: str
    description: str
    candidate_count: int
    top_candidate_name: str | None = None
    top_candidate_votes: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """API 응답용 딕셔너리로 변환합니다."""
        return asdict(self)


def row_to_category(row: tuple) -> Category:
    """데이터베이스 행을 Category 객체로 변환합니다.

    Args:
        row: (id, name, description, candidate_count,
            top_candidate_name, top_candidate_votes) 순서의 행.

    Returns:
        변환된 Category 객체.
    """
    top_name = row[4]
    top_votes = row[5]
    return Category(
        id=str(row[0]),
        name=row[1],
        description=row[2] or "",
        candidate_count=int(row[3] or 0),
        top_candidate_name=top_name,
        top_candidate_votes=(
            int(top_votes or 0) if top_name is not None else None
        ),
    )


async def get_all_categories(session: DbSession) -> list[Category]:
    """모든 카테고리를 이름 오름차순으로 조회합니다.

    Args:
        session: 요청 단위 DB 세션.

    Returns:
        Category 목록. 테이블이 비어 있으면 빈 리스트.
    """
    async with session.connect() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                "SELECT id, name, description, candidate_count, "
                "top_candidate_name, top_candidate_votes "
                "FROM categories ORDER BY name ASC"
            )
            rows = await cur.fetchall()
            return [row_to_category(row) for row in rows]
