"""category_listing: 카테고리 목록 화면의 상태와 표시 로직을 담당하는 서비스.

목록은 한 번만 불러오고, 검색은 이미 받은 목록에 대해 메모리에서 수행합니다.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence
from urllib.parse import quote

from models.category_models import Category

logger = logging.getLogger("api")

SKELETON_COUNT = 6
APPLY_URL = "/apply"
CANDIDATES_PATH = "/candidates"

# encodeURIComponent가 인코딩하지 않는 문자
_URI_COMPONENT_SAFE = "-_.!~*'()"


class CategoryFetcher(Protocol):
    """카테고리 목록을 불러오는 클라이언트 인터페이스."""

    async def fetch_categories(self) -> list[Category]: ...


class LoadState(str, enum.Enum):
    """목록 로딩 상태."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def filter_categories(
    categories: Sequence[Category], search_term: str
) -> list[Category]:
    """이름 또는 설명에 검색어가 포함된 카테고리만 남깁니다.

    대소문자를 구분하지 않는 부분 문자열 비교이며 입력 순서를 유지합니다.
    빈 검색어는 전체 목록을 반환합니다.

    Args:
        categories: 전체 카테고리 목록.
        search_term: 사용자가 입력한 검색어.

    Returns:
        조건을 만족하는 카테고리의 새 리스트.
    """
    term = search_term.lower()
    return [
        category
        for category in categories
        if term in category.name.lower() or term in category.description.lower()
    ]


def candidate_count_label(count: int) -> str:
    """후보자 수 배지 문구. 정확히 1명일 때만 단수형."""
    return f"{count} {'Candidate' if count == 1 else 'Candidates'}"


def leading_label(category: Category) -> str | None:
    """선두 후보자 표시 문구. 후보자가 없으면 None."""
    if category.top_candidate_name is None:
        return None
    return f"Leading: {category.top_candidate_name} ({category.top_candidate_votes})"


def candidates_url(category_name: str) -> str:
    """해당 카테고리로 필터링된 후보자 목록 URL."""
    encoded = quote(category_name, safe=_URI_COMPONENT_SAFE)
    return f"{CANDIDATES_PATH}?category={encoded}"


@dataclass(frozen=True)
class CategoryCard:
    """카테고리 카드 하나를 그리는 데 필요한 값."""

    id: str
    name: str
    description: str
    count_label: str
    leading: str | None
    url: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryCard":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            count_label=candidate_count_label(category.candidate_count),
            leading=leading_label(category),
            url=candidates_url(category.name),
        )


@dataclass
class CategoryListState:
    """카테고리 목록 화면 상태.

    filtered_categories는 저장하지 않고 (categories, search_term)에서
    매번 계산합니다.

    Attributes:
        categories: 불러온 전체 카테고리 목록.
        search_term: 현재 검색어.
        load_state: 로딩 상태.
        error: 로딩 실패 시 발생한 예외.
    """

    categories: list[Category] = field(default_factory=list)
    search_term: str = ""
    load_state: LoadState = LoadState.IDLE
    error: Exception | None = None

    @property
    def loading(self) -> bool:
        return self.load_state in (LoadState.IDLE, LoadState.LOADING)

    @property
    def filtered_categories(self) -> list[Category]:
        return filter_categories(self.categories, self.search_term)

    def set_search_term(self, search_term: str) -> None:
        self.search_term = search_term

    async def load(self, fetcher: CategoryFetcher) -> None:
        """카테고리 목록을 한 번 불러옵니다.

        실패해도 예외를 전파하지 않고 FAILED 상태로 끝나며 목록은 비어
        있습니다. IDLE이 아닌 상태에서의 호출은 무시합니다.

        Args:
            fetcher: fetch_categories()를 제공하는 API 클라이언트.
        """
        if self.load_state is not LoadState.IDLE:
            return

        self.load_state = LoadState.LOADING
        try:
            categories = await fetcher.fetch_categories()
        except Exception as e:
            logger.exception("카테고리 목록 불러오기 실패")
            self.error = e
            self.load_state = LoadState.FAILED
            return

        self.categories = list(categories)
        self.load_state = LoadState.LOADED

    def to_context(self) -> dict[str, Any]:
        """템플릿 렌더링용 컨텍스트를 생성합니다.

        FAILED 상태는 빈 목록과 똑같이 표시됩니다.
        """
        cards = (
            []
            if self.loading
            else [CategoryCard.from_category(c) for c in self.filtered_categories]
        )
        return {
            "loading": self.loading,
            "skeleton_count": SKELETON_COUNT,
            "search_term": self.search_term,
            "cards": cards,
            "is_empty": not self.loading and not cards,
            "apply_url": APPLY_URL,
        }
