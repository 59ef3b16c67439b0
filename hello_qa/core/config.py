from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 범용 환경변수(HOST, PORT 등)와 충돌하지 않도록 접두사 필수
    model_config = SettingsConfigDict(env_prefix="HELLO_QA_")

    PROJECT_NAME: str = "hello-qa"

    # 리스너 바인딩 (기본값: 전체 인터페이스 8080)
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # 로깅
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # 비어 있으면 파일 핸들러 없음


settings = Settings()
