import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from app.container import container
from app.gemini_safety import parse_threshold
from app.question.router import router as question_router

# 로거 설정
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

# 라우터 모듈에 Provide 주입 연결
container.wire()


def validate_config() -> None:
    """요청 처리 중이 아니라 기동 시점에 잘못된 설정을 드러낸다."""
    parse_threshold(container.config.gemini.safety_threshold())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    logger.info("🚀 Interview Question Extractor API 시작 중...")
    validate_config()
    yield
    # Shutdown
    logger.info("🔄 Interview Question Extractor API 종료 중...")


# FastAPI 앱 생성 (lifespan 이벤트 핸들러 포함)
app = FastAPI(
    title="Interview Question Extractor",
    version="1.0.0",
    lifespan=lifespan
)

Instrumentator().instrument(app).expose(app)

# 라우터 등록
app.include_router(question_router)
