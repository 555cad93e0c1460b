import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from pmms.core.config import settings
from pmms.core.database import engine, get_session
from pmms.core.exceptions import register_exception_handlers

from pmms import API_PREFIX

# 각 도메인의 라우터들을 임포트합니다.
from pmms.domains.plt.routers import router as plt_router
from pmms.domains.ven.routers import router as ven_router
from pmms.domains.usr.routers import router as usr_router
from pmms.domains.fms.routers import router as fms_router
from pmms.domains.inv.routers import router as inv_router
from pmms.domains.wo.routers import router as wo_router
from pmms.domains.ops.routers import router as ops_router
from pmms.domains.rpt.routers import router as rpt_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 시작/종료 시점 작업을 처리합니다.
    스키마 생성은 배포 도구의 몫이며, 여기서는 연결 풀 정리만 담당합니다.
    """
    logger.info("%s %s 시작 (env=%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)

    yield  # 애플리케이션 실행

    logger.info("FastAPI 애플리케이션 종료 중...")
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI
    redoc_url="/redoc",     # ReDoc
    lifespan=lifespan
)

# -- CORS 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS 환경 변수로 실제 프론트엔드 도메인만 허용해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,  # 쿠키(jwt), 인증 헤더 등을 포함한 요청 허용
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 전역 예외 핸들러 (400 검증 오류, 500 처리되지 않은 오류) --
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
# 각 라우터는 자원 경로(/plants, /machines ...)를 직접 선언하므로 공통 접두사만 붙입니다.
app.include_router(plt_router, prefix=API_PREFIX)
app.include_router(ven_router, prefix=API_PREFIX)
app.include_router(usr_router, prefix=API_PREFIX)
app.include_router(fms_router, prefix=API_PREFIX)
app.include_router(inv_router, prefix=API_PREFIX)
app.include_router(wo_router, prefix=API_PREFIX)
app.include_router(ops_router, prefix=API_PREFIX)
app.include_router(rpt_router, prefix=API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    PMMS API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": "Welcome to PMMS API. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 배포 환경에서 서비스의 정상 작동 여부를 모니터링하는 데 사용합니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        # select(1)은 가장 가볍고 안전한 확인 쿼리입니다.
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection error during health check",
        )
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Database health check failed: No result from test query",
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("pmms.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
