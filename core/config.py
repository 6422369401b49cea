from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정을 관리하는 클래스.

    환경 변수에서 설정을 로드하며, 기본값을 제공합니다.

    Attributes:
        ALLOWED_ORIGINS: CORS 허용 오리진 목록.
        DB_HOST: MySQL 호스트 주소.
        DB_PORT: MySQL 포트 번호.
        DB_USER: MySQL 사용자명.
        DB_PASSWORD: MySQL 비밀번호.
        DB_NAME: MySQL 데이터베이스 이름.
        SESSION_COOKIE_NAME: 호출자 세션 토큰이 담긴 쿠키 이름.
    """

    ALLOWED_ORIGINS: list[str] = [
        "http://127.0.0.1:3000",  # 로컬 개발 (프론트엔드)
        "http://localhost:3000",  # 로컬 개발 (프론트엔드)
    ]

    DB_HOST: str
    DB_PORT: int
    DB_USER: str
    DB_PASSWORD: str
    DB_NAME: str

    DB_POOL_MAXSIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 5

    # 카테고리 뷰가 행 범위를 좁힐 때 사용하는 세션 쿠키
    SESSION_COOKIE_NAME: str = "sb-access-token"

    # 프로덕션에서는 False로 설정하여 상세 에러 메시지 노출 방지
    DEBUG: bool = True

    ERROR_LOG_FILE: str = "server_error.log"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()  # type: ignore[call-arg]  # pydantic-settings는 .env에서 환경 변수를 불러옴.
