"""utils: 유틸리티 모듈을 모아놓은 패키지.

Modules:
    category_api_client: 카테고리 API 호출 클라이언트
"""
