"""category_api_client: 카테고리 API 호출 클라이언트 모듈.

목록 화면이 브라우저와 같은 방식으로 GET /api/categories를 호출합니다.
"""

import httpx
from fastapi import Request

from models.category_models import Category
from schemas.category_schemas import CategoryListAdapter

CATEGORIES_API_PATH = "/api/categories"


class CategoryApiClient:
    """카테고리 API 클라이언트.

    Attributes:
        client: 요청에 사용할 httpx.AsyncClient.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @classmethod
    def from_request(cls, request: Request) -> "CategoryApiClient":
        """실행 중인 앱을 프로세스 내에서 호출하는 클라이언트를 생성합니다.

        호출자의 쿠키를 그대로 전달합니다.
        """
        transport = httpx.ASGITransport(app=request.app)
        client = httpx.AsyncClient(
            transport=transport,
            base_url=str(request.base_url),
            cookies=dict(request.cookies),
        )
        return cls(client)

    async def fetch_categories(self) -> list[Category]:
        """카테고리 목록을 조회합니다.

        Returns:
            Category 목록.

        Raises:
            httpx.HTTPStatusError: 2xx가 아닌 응답.
            httpx.TransportError: 네트워크 오류.
            pydantic.ValidationError: 응답 형식이 올바르지 않은 경우.
        """
        response = await self.client.get(CATEGORIES_API_PATH)
        response.raise_for_status()
        items = CategoryListAdapter.validate_python(response.json())
        return [Category(**item.model_dump()) for item in items]

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "CategoryApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
