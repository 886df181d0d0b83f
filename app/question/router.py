from typing import Any

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse

from app.constants import ErrorMessages, UploadConfig
from app.container import Container
from app.question.handler import handle
from app.question.schema import HealthResponse, QuestionRequest, QuestionResponse
from app.question.service import QuestionService
from app.utils.data_uri import to_data_uri
from app.utils.numbering import format_numbered_questions

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


@router.post("/questions", response_model=QuestionResponse, response_model_exclude_none=True)
@inject
async def extract_questions(
    raw_input: Any = Body(None, description="{transcript} 또는 {videoMedia}"),
    max_size_mb: int = Depends(Provide[Container.config.upload.max_size_mb]),
    question_service: QuestionService = Depends(Provide[Container.question_service]),
) -> QuestionResponse:
    """
    면접 대본 또는 영상(Data URI)에서 면접관의 질문만 추출합니다.
    요청 형식 검증까지 handler에서 하므로, 실패해도 200으로 응답하고 error 필드에 메시지를 담습니다.
    """
    return await handle(raw_input, question_service, max_video_size_mb=max_size_mb)


@router.post("/questions/video", response_model=QuestionResponse, response_model_exclude_none=True)
@inject
async def extract_questions_from_upload(
    file: UploadFile = File(..., description="면접 영상 파일"),
    max_size_mb: int = Depends(Provide[Container.config.upload.max_size_mb]),
    question_service: QuestionService = Depends(Provide[Container.question_service]),
) -> QuestionResponse:
    """업로드된 영상을 Data URI로 변환한 뒤 /questions 와 동일하게 처리합니다."""
    # base64 인코딩 후 한도 안에 들어오는 원본 크기
    max_raw_bytes = max_size_mb * 1024 * 1024 * 3 // 4

    chunks = []
    size = 0
    while True:
        chunk = await file.read(UploadConfig.READ_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > max_raw_bytes:
            return QuestionResponse(error=ErrorMessages.VIDEO_TOO_LARGE.format(max_mb=max_size_mb))
        chunks.append(chunk)

    data = b"".join(chunks)
    video_media = to_data_uri(file.content_type or UploadConfig.DEFAULT_VIDEO_MIME_TYPE, data) if data else ""
    return await handle(QuestionRequest(video_media=video_media), question_service, max_video_size_mb=max_size_mb)


@router.post("/questions/text", response_class=PlainTextResponse)
@inject
async def extract_questions_as_text(
    raw_input: Any = Body(None, description="{transcript} 또는 {videoMedia}"),
    max_size_mb: int = Depends(Provide[Container.config.upload.max_size_mb]),
    question_service: QuestionService = Depends(Provide[Container.question_service]),
) -> PlainTextResponse:
    """복사/내보내기용 번호 목록 텍스트로 응답합니다."""
    response = await handle(raw_input, question_service, max_video_size_mb=max_size_mb)
    if response.error is not None:
        return PlainTextResponse(response.error, status_code=400)
    return PlainTextResponse(format_numbered_questions(response.questions))
