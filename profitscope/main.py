# profitscope/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 서버 기동 시 테이블 생성
# - 도메인 예외 → HTTP 응답 변환
# -----------------------------------------------------------------------------
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from profitscope.core.config import settings
from profitscope.core.errors import ProfitscopeError
from profitscope.core.logging import configure_logging
from profitscope.db.session import Base, engine
from profitscope.routers import metrics, products, scenarios, workspace

configure_logging()

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
async def on_startup():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{settings.APP_NAME} 기동 ({settings.ENV})")


@app.exception_handler(ProfitscopeError)
async def profitscope_error_handler(request: Request, exc: ProfitscopeError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(metrics.router)
app.include_router(products.router)
app.include_router(scenarios.router)
app.include_router(workspace.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
