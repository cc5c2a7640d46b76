# profitscope/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 파일 회전/백트레이스/레벨 지정
# - 콘솔(stderr) 핸들러 병행
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from profitscope.core.config import settings


def configure_logging(level: str | None = None) -> None:
    level = level or settings.LOG_LEVEL
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(exist_ok=True, parents=True)

    logger.remove()  # 기본 핸들러 제거
    logger.add(sys.stderr, level=level)
    logger.add(
        log_dir / "app.log",
        rotation="10 MB",
        retention=10,  # 최근 10개 파일 유지
        enqueue=True,  # 멀티프로세스 안전
        backtrace=True,
        diagnose=settings.ENV == "dev",
        level=level,
    )
