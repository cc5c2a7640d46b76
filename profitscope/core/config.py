# profitscope/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "Profitscope"
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite+aiosqlite:///./profitscope.db"
    DB_ECHO: bool = False
    DB_TIMEOUT: float = 15.0  # SQLite 잠금 대기(초)

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )


settings = Settings()
