from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    app_name: str = "IT Development Tracker"

    # 데이터 설정
    load_sample_data: bool = True  # 서버 시작 시 샘플 요청 12건을 불러올지 여부
    recent_request_count: int = 5  # 대시보드에 표시할 최근 요청 수

    # 로그 레벨 (DEBUG, INFO, WARNING ...)
    log_level: str = "INFO"

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["*"]  # CORS 허용 출처

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
